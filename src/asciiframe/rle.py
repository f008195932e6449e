from asciiframe.errors import ColorFlagMismatch, RowCountMismatch, RowLengthMismatch, ZeroCountEntry
from asciiframe.grid import Cell, CompressedFrame, Frame, Run, frame_size


def encode_row(row: list[Cell]) -> list[Run]:
    """Collapse consecutive equal cells into runs.

    Cells only merge when both the character and the colour match, so a
    coloured 'A' next to an uncoloured 'A' starts a new run.
    """
    runs: list[Run] = []
    if not row:
        return runs

    current = row[0]
    count = 1
    for cell in row[1:]:
        if cell == current:
            count += 1
        else:
            runs.append(Run(count, current))
            current = cell
            count = 1
    runs.append(Run(count, current))
    return runs


def encode(frame: Frame) -> CompressedFrame:
    width, height = frame_size(frame)
    if height == 0:
        return CompressedFrame(width=0, height=0, has_color=False)

    has_color = any(cell.rgb is not None for row in frame for cell in row)
    return CompressedFrame(
        width=width,
        height=height,
        has_color=has_color,
        rows=[encode_row(row) for row in frame],
    )


def _decode_row(row_index: int, runs: list[Run]) -> list[Cell]:
    row: list[Cell] = []
    for run_index, run in enumerate(runs):
        if run.count < 1:
            raise ZeroCountEntry(row_index, run_index)
        row.extend([run.cell] * run.count)
    return row


def decode(compressed: CompressedFrame) -> Frame:
    if compressed.width == 0 or compressed.height == 0:
        return []

    frame: Frame = []
    for row_index, runs in enumerate(compressed.rows):
        row = _decode_row(row_index, runs)
        if len(row) != compressed.width:
            raise RowLengthMismatch(row_index, len(row), compressed.width)
        frame.append(row)

    if len(frame) != compressed.height:
        raise RowCountMismatch(len(frame), compressed.height)

    has_color = any(cell.rgb is not None for row in frame for cell in row)
    if has_color != compressed.has_color:
        raise ColorFlagMismatch(compressed.has_color, has_color)
    return frame
