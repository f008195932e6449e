from dataclasses import dataclass

from asciiframe.charsets import DEFAULT_RAMP
from asciiframe.errors import ConfigError


@dataclass(frozen=True)
class ConverterConfig:
    """Options for turning an image into a frame.

    charset: characters ordered dark to bright.
    width: output width in cells.
    height: output height in cells, or None to derive it from the image
        aspect ratio.
    brightness, contrast: multiplicative factors, 1.0 leaves colours as is.
        Brightness is applied first.
    colour: keep per-cell RGB; otherwise cells are monochrome.
    aspect_ratio: height correction for characters being taller than wide.
    """

    charset: str = DEFAULT_RAMP
    width: int = 80
    height: int | None = None
    brightness: float = 1.0
    contrast: float = 1.0
    colour: bool = False
    aspect_ratio: float = 0.55

    def __post_init__(self):
        if not self.charset:
            raise ConfigError("charset must contain at least one character")
        if self.width <= 0:
            raise ConfigError("width must be greater than 0")
        if self.height is not None and self.height <= 0:
            raise ConfigError("height must be greater than 0")
        if self.brightness <= 0:
            raise ConfigError("brightness must be positive")
        if self.contrast <= 0:
            raise ConfigError("contrast must be positive")
        if self.aspect_ratio <= 0:
            raise ConfigError("aspect_ratio must be positive")


@dataclass(frozen=True)
class PipelineConfig:
    compression_level: int = 9
    max_cells: int | None = None  # None disables the size ceiling

    def __post_init__(self):
        if not 0 <= self.compression_level <= 9:
            raise ConfigError(f"compression_level must be in 0..9, got {self.compression_level}")
        if self.max_cells is not None and self.max_cells <= 0:
            raise ConfigError("max_cells must be greater than 0")
