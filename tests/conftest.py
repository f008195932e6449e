import pytest

from asciiframe.grid import Cell

RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def mixed_frame():
    """Three rows mixing coloured and uncoloured runs of the same character."""
    return [
        [Cell("A", RED), Cell("A", RED), Cell("A"), Cell("A")],
        [Cell("#")] * 4,
        [Cell("x"), Cell("y", BLUE), Cell("y", BLUE), Cell(" ")],
    ]
