from pathlib import Path

import numpy as np
from PIL import Image

from asciiframe.config import ConverterConfig
from asciiframe.errors import ConfigError
from asciiframe.grid import Cell, Frame

# ITU-R BT.601 luma weights
_LUMA = np.array([0.299, 0.587, 0.114])


def output_height(image: Image.Image, config: ConverterConfig) -> int:
    if config.height is not None:
        return config.height
    # Terminal characters are taller than wide; compensate so output isn't stretched
    return int(config.width * image.height / image.width * config.aspect_ratio)


def adjust_colours(rgb: np.ndarray, brightness: float, contrast: float) -> np.ndarray:
    """Apply brightness then contrast around mid-grey, clamped to 0..255."""
    adjusted = (rgb.astype(np.float64) * brightness - 128.0) * contrast + 128.0
    return np.clip(adjusted, 0, 255).astype(np.uint8)


def intensity_to_index(intensity: np.ndarray, charset_len: int) -> np.ndarray:
    return intensity.astype(np.int64) * (charset_len - 1) // 255


def image_to_frame(image: Image.Image | str | Path, config: ConverterConfig | None = None) -> Frame:
    config = config or ConverterConfig()
    if not isinstance(image, Image.Image):
        image = Image.open(image)

    height = output_height(image, config)
    if height == 0:
        raise ConfigError("Calculated output height is 0")
    size = (config.width, height)
    chars = config.charset

    if config.colour:
        resized = image.convert("RGB").resize(size, Image.LANCZOS)
        rgb = adjust_colours(np.asarray(resized), config.brightness, config.contrast)
        intensity = (rgb.astype(np.float64) @ _LUMA).astype(np.uint8)
        indices = intensity_to_index(intensity, len(chars))
        return [
            [Cell(chars[i], (int(r), int(g), int(b))) for i, (r, g, b) in zip(index_row, rgb_row)]
            for index_row, rgb_row in zip(indices, rgb)
        ]

    gray = np.asarray(image.convert("L").resize(size, Image.NEAREST))
    indices = intensity_to_index(gray, len(chars))
    return [[Cell(chars[i]) for i in index_row] for index_row in indices]
