import pytest

from asciiframe.errors import ColorFlagMismatch, RowCountMismatch, RowLengthMismatch, ZeroCountEntry
from asciiframe.grid import Cell, CompressedFrame, Run
from asciiframe.rle import decode, encode, encode_row
from tests.conftest import BLUE, RED


def text_row(text, rgb=None):
    return [Cell(c, rgb) for c in text]


def test_empty_frame():
    compressed = encode([])
    assert compressed == CompressedFrame(width=0, height=0, has_color=False, rows=[])
    assert decode(compressed) == []


def test_rows_all_empty():
    compressed = encode([[], [], []])
    assert compressed.width == 0
    assert compressed.height == 3
    assert compressed.rows == [[], [], []]
    assert compressed.has_color is False


def test_single_cell():
    compressed = encode([[Cell("A")]])
    assert (compressed.width, compressed.height) == (1, 1)
    assert compressed.rows == [[Run(1, Cell("A"))]]


def test_repeated_groups():
    compressed = encode([text_row("AAABBBCCCC")])
    assert compressed.width == 10
    assert compressed.rows[0] == [Run(3, Cell("A")), Run(3, Cell("B")), Run(4, Cell("C"))]


def test_no_repetition_gives_one_run_per_cell():
    runs = encode([text_row("ABCDEF")]).rows[0]
    assert len(runs) == 6
    assert [run.count for run in runs] == [1] * 6
    assert "".join(run.cell.char for run in runs) == "ABCDEF"


def test_long_uniform_row_is_single_run():
    compressed = encode([text_row("A" * 100)])
    assert compressed.width == 100
    assert compressed.rows == [[Run(100, Cell("A"))]]


def test_coloured_runs():
    row = [Cell("A", RED), Cell("A", RED), Cell("B", BLUE), Cell("B", BLUE)]
    compressed = encode([row])
    assert compressed.rows[0] == [Run(2, Cell("A", RED)), Run(2, Cell("B", BLUE))]
    assert compressed.has_color is True


def test_colour_splits_runs_of_same_character():
    row = [Cell("A", RED), Cell("A", RED), Cell("A"), Cell("A")]
    runs = encode_row(row)
    assert runs == [Run(2, Cell("A", RED)), Run(2, Cell("A"))]


def test_different_colours_split_runs():
    runs = encode_row([Cell("A", RED), Cell("A", BLUE)])
    assert len(runs) == 2


def test_has_color_false_when_monochrome():
    assert encode([text_row("abc"), text_row("def")]).has_color is False


@pytest.mark.parametrize("row_index", [0, 1, 2])
def test_has_color_true_regardless_of_row(row_index):
    frame = [text_row("aaa") for _ in range(3)]
    frame[row_index][1] = Cell("a", RED)
    assert encode(frame).has_color is True


def test_encode_never_emits_zero_counts(mixed_frame):
    compressed = encode(mixed_frame)
    assert all(run.count >= 1 for row in compressed.rows for run in row)


def test_row_counts_sum_to_width(mixed_frame):
    compressed = encode(mixed_frame)
    assert len(compressed.rows) == compressed.height
    for row in compressed.rows:
        assert sum(run.count for run in row) == compressed.width


@pytest.mark.parametrize(
    "frame",
    [
        [[Cell("A")]],
        [text_row("AAAA"), text_row("BBBB")],
        [text_row("ABAB"), text_row("BABA")],
        [[Cell("A", RED), Cell("A"), Cell("A", RED), Cell("A")]],
        [text_row("██ "), text_row("  ░")],
    ],
)
def test_roundtrip(frame):
    assert decode(encode(frame)) == frame


def test_roundtrip_mixed(mixed_frame):
    assert decode(encode(mixed_frame)) == mixed_frame


def test_decode_zero_count():
    compressed = CompressedFrame(width=1, height=1, has_color=False, rows=[[Run(0, Cell("A"))]])
    with pytest.raises(ZeroCountEntry) as exc:
        decode(compressed)
    assert (exc.value.row_index, exc.value.run_index) == (0, 0)


def test_decode_zero_count_in_later_row():
    compressed = CompressedFrame(
        width=2,
        height=2,
        has_color=False,
        rows=[[Run(2, Cell("A"))], [Run(2, Cell("B")), Run(0, Cell("C"))]],
    )
    with pytest.raises(ZeroCountEntry) as exc:
        decode(compressed)
    assert (exc.value.row_index, exc.value.run_index) == (1, 1)


def test_decode_row_length_mismatch():
    compressed = CompressedFrame(
        width=10,
        height=2,
        has_color=False,
        rows=[[Run(10, Cell("A"))], [Run(4, Cell("B")), Run(3, Cell("C"))]],
    )
    with pytest.raises(RowLengthMismatch) as exc:
        decode(compressed)
    assert (exc.value.row_index, exc.value.actual, exc.value.expected) == (1, 7, 10)


def test_decode_row_too_long():
    compressed = CompressedFrame(width=2, height=1, has_color=False, rows=[[Run(3, Cell("A"))]])
    with pytest.raises(RowLengthMismatch):
        decode(compressed)


def test_decode_row_count_mismatch():
    compressed = CompressedFrame(width=1, height=3, has_color=False, rows=[[Run(1, Cell("A"))]])
    with pytest.raises(RowCountMismatch) as exc:
        decode(compressed)
    assert (exc.value.actual, exc.value.expected) == (1, 3)


def test_decode_degenerate_skips_validation():
    # Zero width short-circuits before any row is inspected
    compressed = CompressedFrame(width=0, height=2, has_color=False, rows=[[Run(0, Cell("A"))]])
    assert decode(compressed) == []


def test_decode_colour_flag_set_without_coloured_cells():
    compressed = CompressedFrame(width=1, height=1, has_color=True, rows=[[Run(1, Cell("a"))]])
    with pytest.raises(ColorFlagMismatch) as exc:
        decode(compressed)
    assert (exc.value.declared, exc.value.actual) == (True, False)


def test_decode_colour_flag_missing_for_coloured_cells():
    compressed = CompressedFrame(
        width=2, height=1, has_color=False, rows=[[Run(1, Cell("a")), Run(1, Cell("b", RED))]]
    )
    with pytest.raises(ColorFlagMismatch):
        decode(compressed)
