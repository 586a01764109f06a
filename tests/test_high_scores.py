import pytest

from simongame.high_scores import MAX_HIGH_SCORES, MAX_NAME_LENGTH, HighScore, HighScoreTable


def test_empty_table_has_no_lines():
    assert HighScoreTable().lines() == []


def test_first_score_goes_to_top():
    table = HighScoreTable()
    assert table.check(3) == 0
    assert table.entries[0] == HighScore(name="", score=3)


def test_zero_score_not_recorded():
    table = HighScoreTable()
    assert table.check(0) is None
    assert table.lines() == []


def test_scores_kept_in_descending_order():
    table = HighScoreTable()
    for score in [4, 9, 1, 7, 6, 2, 8]:
        table.check(score)
    scores = [e.score for e in table.entries]
    assert scores == sorted(scores, reverse=True)
    assert scores == [9, 8, 7, 6, 4]
    assert len(table.entries) == MAX_HIGH_SCORES


def test_equal_score_goes_below_existing():
    table = HighScoreTable()
    table.check(5)
    table.set_name(0, "first")
    assert table.check(5) == 1
    assert table.entries[0].name == "first"


def test_score_not_beating_lowest_is_rejected():
    table = HighScoreTable()
    for score in [10, 9, 8, 7, 6]:
        table.check(score)
    assert table.check(6) is None
    assert [e.score for e in table.entries] == [10, 9, 8, 7, 6]


def test_insert_shifts_names_down():
    table = HighScoreTable()
    table.check(2)
    table.set_name(0, "ann")
    index = table.check(5)
    table.set_name(index, "bob")
    assert table.lines() == ["bob 5", "ann 2"]


def test_name_is_truncated():
    table = HighScoreTable()
    table.check(1)
    table.set_name(0, "x" * 40)
    assert len(table.entries[0].name) == MAX_NAME_LENGTH - 1


def test_set_name_bad_index():
    with pytest.raises(IndexError):
        HighScoreTable().set_name(MAX_HIGH_SCORES, "name")