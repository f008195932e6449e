from dataclasses import dataclass, field

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Cell:
    char: str
    rgb: RGB | None = None  # None for monochrome output


@dataclass(frozen=True)
class Run:
    count: int
    cell: Cell


Frame = list[list[Cell]]


@dataclass
class CompressedFrame:
    width: int
    height: int
    has_color: bool
    rows: list[list[Run]] = field(default_factory=list)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def run_count(self) -> int:
        return sum(len(row) for row in self.rows)


def frame_size(frame: Frame) -> tuple[int, int]:
    """Return (width, height) of a frame, taking width from the first row."""
    if not frame:
        return (0, 0)
    return (len(frame[0]), len(frame))
