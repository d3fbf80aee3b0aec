from __future__ import annotations

import pytest

from dot_engine.buffer import (
    BoundsError,
    Buffer,
    BufferEnd,
    BufferStart,
    Dot,
    Index,
    LineEnd,
    LineStart,
    RangeOrderError,
)

TEXT = "Hello there !\nHow are you ?\nI test a text editor."


def make_buffer(text: str = TEXT) -> Buffer:
    return Buffer.from_text(text)


def test_anchor_left_from_buffer_start() -> None:
    buffer = make_buffer()

    dot = buffer.anchor_left(BufferStart(), Index(5))

    assert dot.get() == "Hello"


def test_anchor_right_on_index() -> None:
    buffer = make_buffer()

    dot = buffer.anchor_right(Index(5), Index(5))

    assert dot.get() == "Hello"


def test_between_two_indices() -> None:
    buffer = make_buffer()

    dot = buffer.between(Index(5), Index(10))

    assert dot.get() == " ther"
    assert buffer.get(dot) == " ther"


def test_default_dot_spans_whole_buffer() -> None:
    buffer = make_buffer()

    assert buffer.new_dot().get() == TEXT
    assert Dot(buffer).bounds == (0, len(TEXT))


def test_dot_repositions_in_place() -> None:
    buffer = make_buffer()
    dot = buffer.new_dot()

    assert dot.anchor_left(LineStart(1), Index(5)) is dot
    assert dot.get() == "How a"

    dot.select(LineStart(2), LineEnd(2))
    assert dot.get() == "I test a text editor."

    dot.anchor_right(Index(4), LineEnd(0))
    assert dot.get() == "e !\n"


def test_move_left_keeps_width() -> None:
    buffer = make_buffer()
    dot = buffer.anchor_right(Index(7), BufferEnd())

    dot.move_left(1)

    assert dot.get() == " editor"
    assert dot.width == 7


def test_move_right_keeps_width() -> None:
    buffer = make_buffer()
    dot = buffer.anchor_left(BufferStart(), Index(5))

    dot.move_right(2)

    assert dot.get() == "llo t"


def test_move_left_past_start_fails_without_change() -> None:
    buffer = make_buffer()
    dot = buffer.anchor_left(BufferStart(), Index(2))

    with pytest.raises(BoundsError):
        dot.move_left(1)

    assert dot.bounds == (0, 2)


def test_move_right_past_end_fails_without_change() -> None:
    buffer = make_buffer()
    dot = buffer.anchor_right(Index(1), BufferEnd())

    with pytest.raises(BoundsError) as info:
        dot.move_right(1)

    assert info.value.index == len(TEXT) + 1
    assert dot.bounds == (len(TEXT) - 1, len(TEXT))


def test_move_left_then_right_restores_bounds() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(5), Index(10))

    dot.move_left(3).move_right(3)

    assert dot.bounds == (5, 10)


def test_extend_left_pulls_upper_edge_down() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(5), Index(10))

    dot.extend_left(2)
    assert dot.bounds == (5, 8)

    dot.extend_left(5)
    assert dot.bounds == (3, 5)


def test_extend_right_pushes_lower_edge_up() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(5), Index(10))

    dot.extend_right(2)
    assert dot.bounds == (7, 10)

    dot.extend_right(6)
    assert dot.bounds == (10, 13)


def test_extend_out_of_range_leaves_dot_unchanged() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(5), Index(10))

    with pytest.raises(BoundsError):
        dot.extend_left(11)
    with pytest.raises(BoundsError):
        dot.extend_right(len(TEXT))

    assert dot.bounds == (5, 10)


def test_trim_grows_the_matching_edge() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(5), Index(10))

    dot.trim_left(3)
    assert dot.bounds == (5, 13)

    dot.trim_right(3)
    assert dot.bounds == (2, 13)


def test_trim_never_inverts() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(20), Index(20))

    for n in (0, 1, 4, 9):
        dot.trim_left(n)
        dot.trim_right(n)
        assert dot.start <= dot.end


def test_trim_out_of_range_fails() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(0), BufferEnd())

    with pytest.raises(BoundsError):
        dot.trim_left(1)
    with pytest.raises(BoundsError):
        dot.trim_right(1)

    assert dot.bounds == (0, len(TEXT))


def test_negative_count_is_rejected() -> None:
    dot = make_buffer().new_dot()

    with pytest.raises(ValueError):
        dot.move_left(-1)


def test_construction_rejects_inverted_or_out_of_range_bounds() -> None:
    buffer = make_buffer()

    with pytest.raises(RangeOrderError):
        buffer.between(Index(10), Index(5))
    with pytest.raises(BoundsError):
        buffer.between(Index(0), Index(len(TEXT) + 1))
    with pytest.raises(BoundsError):
        buffer.anchor_right(Index(6), Index(5))
    with pytest.raises(BoundsError):
        buffer.anchor_left(LineStart(2), Index(30))


def test_failed_reposition_keeps_previous_bounds() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(5), Index(10))

    with pytest.raises(RangeOrderError):
        dot.select(Index(8), Index(2))

    assert dot.bounds == (5, 10)


def test_set_covers_inserted_text() -> None:
    buffer = make_buffer()
    dot = buffer.anchor_left(BufferStart(), Index(5))

    dot.set("Goodbye")

    assert dot.get() == "Goodbye"
    assert dot.bounds == (0, 7)
    assert buffer.text().startswith("Goodbye there !\n")


def test_set_empty_text_deletes_range() -> None:
    buffer = make_buffer()
    dot = buffer.between(LineStart(1), LineEnd(1))

    dot.set("")

    assert dot.is_empty
    assert buffer.text() == "Hello there !\nI test a text editor."


def test_coordinates_report_both_endpoints() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(10), LineEnd(1))

    assert dot.coordinates() == ((0, 10), (2, 0))


def test_copy_is_independent() -> None:
    buffer = make_buffer()
    dot = buffer.between(Index(5), Index(10))

    twin = dot.copy()
    twin.move_right(1)

    assert dot.bounds == (5, 10)
    assert twin.bounds == (6, 11)


def test_constructor_validates_explicit_bounds() -> None:
    buffer = make_buffer()

    with pytest.raises(RangeOrderError):
        Dot(buffer, (10, 2))
    with pytest.raises(BoundsError):
        Dot(buffer, (0, len(TEXT) + 1))
    with pytest.raises(BoundsError):
        Dot(buffer, (-1, 3))

    assert buffer.dots() == ()
    assert Dot(buffer, (2, 10)).get() == "llo ther"
