"""Grouping helpers used by the pattern families."""

from processor.detector import GroupStats, group_by, summarize, count_tags


def test_group_by_keeps_input_order():
    rows = [("Centre", 0.1), ("Littoral", 0.4), ("Centre", -0.3)]
    groups = group_by(rows, key=lambda r: r[0])
    assert list(groups) == ["Centre", "Littoral"]
    assert groups["Centre"] == [("Centre", 0.1), ("Centre", -0.3)]


def test_summarize_counts_and_means():
    rows = [("Centre", 0.1), ("Littoral", 0.4), ("Centre", -0.3)]
    stats = summarize(group_by(rows, key=lambda r: r[0]), value=lambda r: r[1])
    assert stats["Centre"].count == 2
    assert abs(stats["Centre"].mean - (-0.1)) < 1e-9
    assert stats["Littoral"].mean == 0.4


def test_empty_group_mean_is_zero():
    assert GroupStats(count=0, total=0.0).mean == 0.0


def test_count_tags_counts_repeats_and_skips_non_lists():
    counts = count_tags([["anger", "anger"], ["hope"], None, "fear"], tags=lambda t: t)
    assert counts == {"anger": 2, "hope": 1}
