"""Tests for dupline.repetition."""

from dupline.repetition import RepetitionIndex


def test_insert_counts_up():
    index = RepetitionIndex()
    assert [index.insert("int x = 1;") for _ in range(5)] == [1, 2, 3, 4, 5]


def test_prefix_does_not_share_count():
    index = RepetitionIndex()
    assert index.insert("abc") == 1
    assert index.insert("abcdef") == 1
    assert index.count("abc") == 1
    assert index.count("abcdef") == 1
    assert index.count("ab") == 0


def test_longer_first_then_prefix():
    index = RepetitionIndex()
    index.insert("return value;")
    assert index.insert("return") == 1
    assert index.insert("return value;") == 2


def test_distinct_texts_independent():
    index = RepetitionIndex()
    index.insert("a")
    index.insert("b")
    index.insert("a")
    assert index.count("a") == 2
    assert index.count("b") == 1


def test_count_unknown_text():
    index = RepetitionIndex()
    assert index.count("missing") == 0
    assert "missing" not in index


def test_len_counts_distinct_texts():
    index = RepetitionIndex()
    for text in ["x", "xy", "x", "z"]:
        index.insert(text)
    assert len(index) == 3
    assert "xy" in index


def test_empty_string_counted_at_root():
    index = RepetitionIndex()
    assert index.insert("") == 1
    assert index.insert("") == 2
    assert index.count("a") == 0


def test_contains_non_string():
    assert 42 not in RepetitionIndex()


def test_unicode_text():
    index = RepetitionIndex()
    index.insert("let s = \"héllo\";")
    assert index.insert("let s = \"héllo\";") == 2
