import pytest

from simongame.lfsr import MASK, Lfsr


def test_steps_are_in_range():
    lfsr = Lfsr(0x11548151)
    steps = [lfsr.step() for _ in range(500)]
    assert all(0 <= s <= 3 for s in steps)
    assert set(steps) == {0, 1, 2, 3}


def test_same_seed_gives_same_sequence():
    a = Lfsr(0x12345678)
    b = Lfsr(0x12345678)
    assert [a.step() for _ in range(64)] == [b.step() for _ in range(64)]


def test_reseed_restarts_sequence():
    lfsr = Lfsr(0xCAFEBABE)
    first = [lfsr.step() for _ in range(32)]
    lfsr.reseed(0xCAFEBABE)
    assert [lfsr.step() for _ in range(32)] == first


def test_odd_state_applies_mask():
    lfsr = Lfsr(1)
    result = lfsr.step()
    assert lfsr.state == MASK
    assert result == MASK & 0b11


def test_zero_seed_is_fixed_point():
    lfsr = Lfsr(0)
    assert [lfsr.step() for _ in range(10)] == [0] * 10
    assert lfsr.state == 0


@pytest.mark.parametrize("seed", [0x1_0000_0000 + 5, -1])
def test_seed_is_truncated_to_32_bits(seed):
    lfsr = Lfsr(seed)
    assert 0 <= lfsr.state <= 0xFFFFFFFF
    assert lfsr.state == seed & 0xFFFFFFFF


def test_state_stays_within_32_bits():
    lfsr = Lfsr(0xFFFFFFFF)
    for _ in range(200):
        lfsr.step()
        assert 0 <= lfsr.state <= 0xFFFFFFFF