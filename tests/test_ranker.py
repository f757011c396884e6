import pytest

from trigramminer.frequency import FrequencyTable
from trigramminer.ranker import RankedPhrase, TrigramResult, rank_phrases


def make_table(counts):
    table = FrequencyTable()
    for phrase, count in counts.items():
        for _ in range(count):
            table.increment(phrase)
    return table


TIED = {"g h i": 3, "d e f": 5, "a b c": 5}


def test_ties_break_alphabetically():
    table = make_table(TIED)
    assert rank_phrases(table, limit=2) == [("a b c", 5), ("d e f", 5)]
    assert rank_phrases(table, limit=3)[2] == RankedPhrase("g h i", 3)


def test_limit_caps_result():
    table = make_table({f"w{i} x y": 1 + i % 4 for i in range(150)})
    ranked = rank_phrases(table)
    assert len(ranked) == 100
    counts = [r.count for r in ranked]
    assert counts == sorted(counts, reverse=True)


def test_empty_table():
    assert rank_phrases(FrequencyTable()) == []
    assert rank_phrases(make_table(TIED), limit=0) == []


def test_negative_limit():
    with pytest.raises(ValueError):
        rank_phrases(FrequencyTable(), limit=-1)


def test_result_frame():
    result = TrigramResult.from_table(make_table(TIED), source="demo", limit=3)
    assert list(result.phrases_df.columns) == ["rank", "phrase", "count"]
    assert result.phrases_df["rank"].tolist() == [1, 2, 3]
    assert result.entries == [("a b c", 5), ("d e f", 5), ("g h i", 3)]
    assert result.total_trigrams == 13
    assert result.distinct_trigrams == 3
    assert not result.is_empty
    assert len(result) == 3


def test_result_keeps_totals_beyond_limit():
    result = TrigramResult.from_table(make_table(TIED), source="demo", limit=1)
    assert result.entries == [("a b c", 5)]
    assert result.distinct_trigrams == 3


def test_empty_result():
    result = TrigramResult.from_table(FrequencyTable(), source="StdIn")
    assert result.is_empty
    assert result.entries == []
    assert result.total_trigrams == 0
