import io
import struct
from typing import BinaryIO

from asciiframe.errors import DeserializationError, SerializationError
from asciiframe.grid import Cell, CompressedFrame, Run

MAGIC = b"AFRM"
FORMAT_VERSION = 1

_HEADER = struct.Struct(">IIBI")  # width, height, has_color, row count
_U32 = struct.Struct(">I")
_U8 = struct.Struct("B")
_RGB = struct.Struct("BBB")


def _write_cell(f: BinaryIO, cell: Cell) -> None:
    if len(cell.char) != 1:
        raise SerializationError(f"Cell must hold exactly one character, got {cell.char!r}")
    char_bytes = cell.char.encode("utf-8")
    f.write(_U8.pack(len(char_bytes)))
    f.write(char_bytes)
    if cell.rgb is None:
        f.write(_U8.pack(0))
    else:
        f.write(_U8.pack(1))
        f.write(_RGB.pack(*cell.rgb))


def serialize(compressed: CompressedFrame) -> bytes:
    f = io.BytesIO()
    try:
        f.write(MAGIC)
        f.write(_U8.pack(FORMAT_VERSION))
        f.write(_HEADER.pack(compressed.width, compressed.height, int(compressed.has_color), len(compressed.rows)))
        for row in compressed.rows:
            f.write(_U32.pack(len(row)))
            for run in row:
                f.write(_U32.pack(run.count))
                _write_cell(f, run.cell)
    except (struct.error, TypeError, UnicodeEncodeError) as e:
        raise SerializationError(str(e)) from e
    return f.getvalue()


def _read(f: BinaryIO, size: int) -> bytes:
    data = f.read(size)
    if len(data) != size:
        raise DeserializationError(f"Truncated frame: wanted {size} bytes at offset {f.tell() - len(data)}")
    return data


def _read_flag(f: BinaryIO, what: str) -> bool:
    (value,) = _U8.unpack(_read(f, 1))
    if value > 1:
        raise DeserializationError(f"Invalid {what} flag: {value}")
    return value == 1


def _read_cell(f: BinaryIO) -> Cell:
    (char_len,) = _U8.unpack(_read(f, 1))
    try:
        char = _read(f, char_len).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DeserializationError(f"Invalid character bytes: {e}") from e
    if len(char) != 1:
        raise DeserializationError(f"Cell must hold exactly one character, got {char!r}")
    rgb = _RGB.unpack(_read(f, 3)) if _read_flag(f, "colour") else None
    return Cell(char, rgb)


def deserialize(data: bytes) -> CompressedFrame:
    f = io.BytesIO(data)
    magic = f.read(4)
    if magic != MAGIC:
        raise DeserializationError(f"Not an AFRM frame: {magic!r}")
    (version,) = _U8.unpack(_read(f, 1))
    if version != FORMAT_VERSION:
        raise DeserializationError(f"Unsupported format version: {version}")

    width, height, has_color, row_count = _HEADER.unpack(_read(f, _HEADER.size))
    if has_color > 1:
        raise DeserializationError(f"Invalid has_color flag: {has_color}")

    rows: list[list[Run]] = []
    for _ in range(row_count):
        (run_count,) = _U32.unpack(_read(f, 4))
        row = []
        for _ in range(run_count):
            (count,) = _U32.unpack(_read(f, 4))
            row.append(Run(count, _read_cell(f)))
        rows.append(row)

    trailing = len(data) - f.tell()
    if trailing:
        raise DeserializationError(f"{trailing} trailing bytes after frame")
    return CompressedFrame(width=width, height=height, has_color=bool(has_color), rows=rows)
