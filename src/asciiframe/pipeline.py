from dataclasses import dataclass

from asciiframe import compressor, rle, serializer
from asciiframe.config import PipelineConfig
from asciiframe.errors import AsciiFrameError, FrameTooLarge, PipelineError
from asciiframe.grid import CompressedFrame, Frame


@dataclass(frozen=True)
class CompressionStats:
    original_size: int  # serialized run-length bytes
    compressed_size: int
    ratio: float


def _stage(name: str, func, *args):
    try:
        return func(*args)
    except AsciiFrameError as e:
        raise PipelineError(name, e) from e


class Pipeline:
    """Run-length encoding, serialization and gzip, and the inverse."""

    def __init__(self, config: PipelineConfig | None = None):
        self.config = config or PipelineConfig()

    def _check_frame(self, frame: Frame) -> None:
        limit = self.config.max_cells
        if limit is None:
            return
        cells = sum(len(row) for row in frame)
        if cells > limit:
            raise FrameTooLarge(cells, limit)

    def _check_compressed(self, compressed: CompressedFrame) -> None:
        # Checked against declared sizes and run counts so nothing is expanded
        limit = self.config.max_cells
        if limit is None:
            return
        declared = compressed.cell_count
        expanded = sum(run.count for row in compressed.rows for run in row)
        cells = max(declared, expanded)
        if cells > limit:
            raise FrameTooLarge(cells, limit)

    def _encode(self, frame: Frame) -> bytes:
        _stage("limit", self._check_frame, frame)
        compressed = _stage("encode", rle.encode, frame)
        return _stage("serialize", serializer.serialize, compressed)

    def compress(self, frame: Frame) -> bytes:
        return self.compress_with_stats(frame)[0]

    def compress_with_stats(self, frame: Frame) -> tuple[bytes, CompressionStats]:
        serialized = self._encode(frame)
        packed = _stage("compress", compressor.compress, serialized, self.config.compression_level)
        stats = CompressionStats(
            original_size=len(serialized),
            compressed_size=len(packed),
            ratio=compressor.compression_ratio(serialized, packed),
        )
        return packed, stats

    def decompress(self, data: bytes) -> Frame:
        return _stage("decode", rle.decode, self.inspect(data))

    def inspect(self, data: bytes) -> CompressedFrame:
        """Unpack wire bytes into the run-length form without expanding it."""
        serialized = _stage("decompress", compressor.decompress, data)
        compressed = _stage("deserialize", serializer.deserialize, serialized)
        _stage("limit", self._check_compressed, compressed)
        return compressed


_default = Pipeline()


def compress(frame: Frame) -> bytes:
    return _default.compress(frame)


def decompress(data: bytes) -> Frame:
    return _default.decompress(data)
