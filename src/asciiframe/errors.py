class AsciiFrameError(Exception):
    """Base class for everything raised by asciiframe."""


class ConfigError(AsciiFrameError, ValueError):
    pass


class CodecError(AsciiFrameError):
    """A CompressedFrame violates its structural invariants."""


class ZeroCountEntry(CodecError):
    def __init__(self, row_index: int, run_index: int):
        self.row_index = row_index
        self.run_index = run_index
        super().__init__(f"Run {run_index} in row {row_index} has count 0")


class RowLengthMismatch(CodecError):
    def __init__(self, row_index: int, actual: int, expected: int):
        self.row_index = row_index
        self.actual = actual
        self.expected = expected
        super().__init__(f"Row {row_index} has length {actual} but expected {expected}")


class RowCountMismatch(CodecError):
    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(f"Frame has {actual} rows but expected {expected}")


class SerializationError(AsciiFrameError):
    pass


class DeserializationError(AsciiFrameError):
    pass


class CompressionError(AsciiFrameError):
    pass


class DecompressionError(AsciiFrameError):
    pass


class FrameTooLarge(AsciiFrameError):
    def __init__(self, cells: int, limit: int):
        self.cells = cells
        self.limit = limit
        super().__init__(f"Frame has {cells} cells, limit is {limit}")


class PipelineError(AsciiFrameError):
    """Wraps the failure of a single pipeline stage."""

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage} failed: {cause}")


class ColorFlagMismatch(CodecError):
    def __init__(self, declared: bool, actual: bool):
        self.declared = declared
        self.actual = actual
        super().__init__(f"Frame declares has_color={declared} but its cells say {actual}")
