from asciiframe.grid import Cell, Frame

RESET = "\033[0m"


def _format_cell(cell: Cell) -> str:
    if cell.rgb is None:
        return cell.char
    r, g, b = cell.rgb
    return f"\033[38;2;{r};{g};{b}m{cell.char}"


def frame_to_text(frame: Frame, colour: bool = False) -> str:
    """Render a frame as text, optionally with ANSI truecolor foregrounds."""
    if not colour:
        return "\n".join("".join(cell.char for cell in row) for row in frame)
    return "\n".join("".join(_format_cell(cell) for cell in row) + RESET for row in frame)
