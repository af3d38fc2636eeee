from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .codec import inspect, pack, read_header, unpack
from .config import CodecConfig
from .errors import SaveToolError
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def _cmd_pack(args: argparse.Namespace, config: CodecConfig) -> int:
    header = None
    if args.header_from is not None:
        header = read_header(args.header_from, config=config)
        logger.info("Reusing header from %s", args.header_from)
    pack(args.input, args.output, config=config, header=header)
    return 0


def _cmd_unpack(args: argparse.Namespace, config: CodecConfig) -> int:
    unpack(args.input, args.output, config=config)
    return 0


def _cmd_info(args: argparse.Namespace, config: CodecConfig) -> int:
    info = inspect(args.input, config=config)
    print(f"File:        {info.path} ({info.size} bytes)")
    print(f"Header:      {'zero' if info.header_is_zero else info.header.hex()}")
    print(f"Version:     {info.version}")
    print(f"Salt:        {info.salt.hex()}")
    print(f"Ciphertext:  {info.ciphertext_size} bytes")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="btd6save", description="Unpacking and packing BTD6 save files.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a YAML file overriding the codec constants.",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    sub = p.add_subparsers(dest="cmd", required=True)

    pk = sub.add_parser("pack", help="Pack an unpacked JSON file into a save file")
    pk.add_argument("input", type=Path, help="Unpacked JSON file")
    pk.add_argument("output", type=Path, help="Save file to write")
    pk.add_argument(
        "--header-from",
        type=Path,
        default=None,
        metavar="SAVE",
        help="Copy the header block of an existing save instead of writing a zero header",
    )
    pk.set_defaults(func=_cmd_pack)

    up = sub.add_parser("unpack", help="Unpack a save file into pretty-printed JSON")
    up.add_argument("input", type=Path, help="Packed save file")
    up.add_argument("output", type=Path, help="JSON file to write")
    up.set_defaults(func=_cmd_unpack)

    info = sub.add_parser("info", help="Show the container fields of a save file without decrypting it")
    info.add_argument("input", type=Path, help="Packed save file")
    info.set_defaults(func=_cmd_info)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(debug=args.debug, quiet=args.quiet)

    try:
        config = CodecConfig.load(user_path=args.settings_path)
        return args.func(args, config)
    except SaveToolError as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
