import argparse
import logging
import shutil
import sys
from pathlib import Path

from asciiframe import serializer
from asciiframe.charsets import RAMPS
from asciiframe.compressor import compression_ratio
from asciiframe.config import ConverterConfig, PipelineConfig
from asciiframe.converter import image_to_frame
from asciiframe.errors import AsciiFrameError
from asciiframe.logs import request_span, setup_logging
from asciiframe.pipeline import Pipeline
from asciiframe.render import frame_to_text

logger = logging.getLogger("asciiframe.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert images to compressed ASCII-art frames and back")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    parser.add_argument(
        "--max-cells", type=int, default=None, help="Reject frames with more cells than this (default: no limit)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="Convert an image and write the compressed frame")
    encode.add_argument("image", help="Path to input image")
    encode.add_argument("-o", "--output", required=True, help="Path to write the compressed frame")
    encode.add_argument(
        "-w", "--width", type=int, default=None, help="Output width in columns (default: terminal width)"
    )
    encode.add_argument("--height", type=int, default=None, help="Output height in rows (default: from aspect ratio)")
    encode.add_argument("-c", "--colour", action="store_true", default=False, help="Keep per-cell colour")
    encode.add_argument("--brightness", type=float, default=1.0, help="Brightness factor (default: 1.0)")
    encode.add_argument("--contrast", type=float, default=1.0, help="Contrast factor (default: 1.0)")
    encode.add_argument(
        "-r", "--ramp", default="default", choices=sorted(RAMPS), help="Character ramp to use (default: default)"
    )
    encode.add_argument("--charset", default=None, help="Custom characters, dark to bright (overrides --ramp)")
    encode.add_argument("--level", type=int, default=9, help="Gzip compression level 0-9 (default: 9)")

    decode = sub.add_parser("decode", help="Print a compressed frame")
    decode.add_argument("frame", help="Path to compressed frame")
    decode.add_argument("-c", "--colour", action="store_true", default=False, help="Enable truecolor ANSI output")

    stats = sub.add_parser("stats", help="Describe a compressed frame")
    stats.add_argument("frame", help="Path to compressed frame")
    return parser


def _encode(args, pipeline_config: PipelineConfig) -> None:
    width = args.width if args.width is not None else shutil.get_terminal_size().columns
    config = ConverterConfig(
        charset=args.charset or RAMPS[args.ramp],
        width=width,
        height=args.height,
        brightness=args.brightness,
        contrast=args.contrast,
        colour=args.colour,
    )
    frame = image_to_frame(args.image, config)
    data, stats = Pipeline(pipeline_config).compress_with_stats(frame)
    Path(args.output).write_bytes(data)
    logger.info(
        "wrote %s: original_size=%d compressed_size=%d ratio=%.3f",
        args.output,
        stats.original_size,
        stats.compressed_size,
        stats.ratio,
    )


def _decode(args, pipeline_config: PipelineConfig) -> None:
    frame = Pipeline(pipeline_config).decompress(Path(args.frame).read_bytes())
    print(frame_to_text(frame, colour=args.colour))


def _stats(args, pipeline_config: PipelineConfig) -> None:
    data = Path(args.frame).read_bytes()
    compressed = Pipeline(pipeline_config).inspect(data)
    print(f"width: {compressed.width}")
    print(f"height: {compressed.height}")
    print(f"colour: {'yes' if compressed.has_color else 'no'}")
    print(f"runs: {compressed.run_count}")
    serialized = serializer.serialize(compressed)
    print(f"serialized bytes: {len(serialized)}")
    print(f"compressed bytes: {len(data)}")
    print(f"ratio: {compression_ratio(serialized, data):.3f}")


COMMANDS = {"encode": _encode, "decode": _decode, "stats": _stats}


def main(argv: list[str] | None = None):
    args = _build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    path = Path(args.image if args.command == "encode" else args.frame)
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        sys.exit(1)

    try:
        pipeline_config = PipelineConfig(compression_level=getattr(args, "level", 9), max_cells=args.max_cells)
        with request_span(args.command, logger):
            COMMANDS[args.command](args, pipeline_config)
    except (AsciiFrameError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        sys.exit(1)
