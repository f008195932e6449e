import gzip
import zlib

from asciiframe.errors import CompressionError, DecompressionError

DEFAULT_LEVEL = 9


def compress(data: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    """Gzip a byte buffer.

    The header timestamp is pinned to zero so equal input always gives equal
    output. Empty input is valid and yields a minimal gzip member.
    """
    try:
        return gzip.compress(data, compresslevel=level, mtime=0)
    except (zlib.error, ValueError) as e:
        raise CompressionError(str(e)) from e


def decompress(data: bytes) -> bytes:
    if not data:
        raise DecompressionError("Empty input is not a gzip stream")
    try:
        return gzip.decompress(data)
    except (gzip.BadGzipFile, zlib.error, EOFError) as e:
        raise DecompressionError(str(e)) from e


def compression_ratio(original: bytes, compressed: bytes) -> float:
    """Compressed size as a fraction of the original; 0.0 for empty input."""
    if not original:
        return 0.0
    return len(compressed) / len(original)
