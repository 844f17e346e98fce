from __future__ import annotations

import pytest

from textstore.buffer import OutOfBoundsError, Point, TextStore


def make_store() -> TextStore:
    return TextStore.from_text("hello\n\nworld")


def snapshot(store: TextStore) -> tuple[str, tuple[int, ...]]:
    return store.content, store.line_lengths


def test_insert_char_in_middle_of_line() -> None:
    store = make_store()

    store.insert_char(Point(2, 2), "X")

    assert store.line(2) == "woXrld"
    assert store.line_lengths == (5, 0, 6)
    assert store.content == "hellowoXrld"


def test_insert_char_appends_at_end_of_line() -> None:
    store = make_store()

    store.insert_char(Point(5, 0), "!")
    store.insert_char(Point(0, 1), "-")

    assert list(store.lines()) == ["hello!", "-", "world"]
    assert sum(store.line_lengths) == len(store.content)


def test_insert_char_past_end_of_line_is_rejected() -> None:
    store = make_store()
    before = snapshot(store)

    with pytest.raises(OutOfBoundsError):
        store.insert_char(Point(6, 0), "!")

    assert snapshot(store) == before


EDITS_AT = {
    "insert_char": lambda store, at: store.insert_char(at, "x"),
    "remove_char": lambda store, at: store.remove_char(at),
    "replace_char": lambda store, at: store.replace_char(at, "x"),
    "insert_str": lambda store, at: store.insert_str(at, "xy"),
    "remove_str": lambda store, at: store.remove_str(at, 1),
    "replace_str": lambda store, at: store.replace_str(at, "xy"),
}


@pytest.mark.parametrize("operation", sorted(EDITS_AT))
def test_edits_on_missing_row_leave_store_untouched(operation: str) -> None:
    store = make_store()
    before = snapshot(store)

    with pytest.raises(OutOfBoundsError) as excinfo:
        EDITS_AT[operation](store, Point(0, 3))

    assert excinfo.value.point == Point(0, 3)
    assert snapshot(store) == before


def test_remove_char_returns_removed_character() -> None:
    store = make_store()

    assert store.remove_char(Point(4, 0)) == "o"
    assert store.line(0) == "hell"
    assert store.line_lengths == (4, 0, 5)


def test_remove_char_requires_existing_character() -> None:
    store = make_store()

    with pytest.raises(OutOfBoundsError):
        store.remove_char(Point(5, 0))
    with pytest.raises(OutOfBoundsError):
        store.remove_char(Point(0, 1))


def test_replace_char_swaps_in_place() -> None:
    store = make_store()

    assert store.replace_char(Point(0, 0), "j") == "h"
    assert store.line(0) == "jello"
    assert store.line_lengths == (5, 0, 5)


def test_replace_char_follows_span_rule_at_line_end() -> None:
    store = make_store()

    with pytest.raises(OutOfBoundsError):
        store.replace_char(Point(4, 0), "!")


def test_insert_str_needs_one_spare_character() -> None:
    store = make_store()

    store.insert_str(Point(1, 2), "ee")

    assert store.line(2) == "weeorld"
    assert store.line_lengths == (5, 0, 7)


def test_insert_str_rejects_span_reaching_line_end() -> None:
    store = make_store()
    before = snapshot(store)

    # column + size + 1 == 6 > 5
    with pytest.raises(OutOfBoundsError):
        store.insert_str(Point(3, 0), "xy")
    # column + size + 1 == 5 fits exactly
    store.insert_str(Point(2, 0), "xy")

    assert store.line(0) == "hexyllo"
    assert before[1][0] + 2 == store.line_lengths[0]


def test_remove_str_removes_exactly_size_characters() -> None:
    store = make_store()

    assert store.remove_str(Point(1, 0), 3) == "ell"
    assert store.line(0) == "ho"
    assert store.content == "howorld"
    assert store.line_lengths == (2, 0, 5)


def test_remove_str_rejects_span_to_end_of_line() -> None:
    store = make_store()
    before = snapshot(store)

    with pytest.raises(OutOfBoundsError):
        store.remove_str(Point(1, 0), 4)

    assert snapshot(store) == before


def test_replace_str_keeps_line_lengths() -> None:
    store = make_store()

    assert store.replace_str(Point(0, 2), "WOR") == "wor"
    assert store.line(2) == "WORld"
    assert store.line_lengths == (5, 0, 5)


def test_separators_cannot_be_inserted() -> None:
    store = make_store()

    with pytest.raises(ValueError):
        store.insert_char(Point(0, 0), "\n")
    with pytest.raises(ValueError):
        store.insert_line(0, "a\r\nb")
    with pytest.raises(ValueError):
        store.insert_char(Point(0, 0), "ab")

    assert store.line_lengths == (5, 0, 5)


def test_offset_of_uses_prefix_sums() -> None:
    store = make_store()

    assert store.offset_of(Point(0, 0)) == 0
    assert store.offset_of(Point(0, 2)) == 5
    assert store.offset_of(Point(5, 2)) == 10


def test_cursor_is_caller_owned() -> None:
    store = make_store()

    store.cursor = Point(3, 2)
    store.insert_char(store.cursor, "_")

    assert store.cursor == Point(3, 2)
    assert store.line(2) == "wor_ld"
