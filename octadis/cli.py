"""Command line driver: disassemble a CHIP-8 ROM file into a listing."""

import argparse
import sys
from typing import Optional, Sequence

from octadis.config import DisassemblerConfig
from octadis.disassembler import decode_program, load_rom
from octadis.logging import ConsoleLogger, progress
from octadis.rendering import render_line


def parse_int(value: str) -> int:
    """Parse decimal or prefixed (0x, 0o, 0b) integers."""
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="octadis",
        description="Disassemble a CHIP-8 program into a listing",
    )
    parser.add_argument("rom", help="Path to the CHIP-8 program file")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write the listing to this file instead of stdout",
    )
    parser.add_argument(
        "--base-address",
        type=parse_int,
        default=None,
        help="Address the program is loaded at (default: 0x200)",
    )
    parser.add_argument(
        "--style",
        choices=["compat", "uppercase"],
        default=None,
        help="Listing style (default: compat)",
    )
    parser.add_argument(
        "--trailing-byte",
        choices=["truncate", "pad"],
        default=None,
        help="Handling of the last byte of an odd-length program (default: truncate)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON config file; command line options take precedence",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Console log level (default: WARNING)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        default=None,
        help="Show a progress bar on stderr",
    )
    return parser


def load_config(args: argparse.Namespace) -> DisassemblerConfig:
    overrides = {
        "base_address": args.base_address,
        "style": args.style,
        "trailing_byte": args.trailing_byte,
        "log_level": args.log_level,
        "progress": args.progress,
    }
    if args.config:
        return DisassemblerConfig.from_file(args.config, **overrides)
    return DisassemblerConfig(**{k: v for k, v in overrides.items() if v is not None})


def write_listing(instructions, config: DisassemblerConfig, sink) -> None:
    for offset, instruction in progress(instructions, total=len(instructions), enabled=config.progress):
        sink.write(render_line(offset, instruction, config.style) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except OSError as e:
        ConsoleLogger().error(f"Couldn't open config file: {e}")
        return 1
    except ValueError as e:
        ConsoleLogger().error(f"Invalid configuration: {e}")
        return 1

    logger = ConsoleLogger(log_level=config.log_level)
    logger.debug(f"Configuration: {config.to_dict()}")

    try:
        rom = load_rom(args.rom)
    except OSError as e:
        logger.error(f"Couldn't open file! {e}")
        return 1
    logger.info(f"Loaded {len(rom)} bytes from {args.rom} at 0x{config.base_address:03x}")

    if len(rom) % 2:
        if config.trailing_byte == "truncate":
            logger.warning(f"Odd program size ({len(rom)} bytes), trailing byte 0x{rom[-1]:02x} not decoded")
        else:
            logger.info("Odd program size, trailing byte padded with 0x00")

    instructions = decode_program(rom, config.base_address, config.trailing_byte)

    try:
        if args.output:
            with open(args.output, "w") as f:
                write_listing(instructions, config, f)
        else:
            write_listing(instructions, config, sys.stdout)
    except OSError as e:
        logger.error(f"Couldn't write listing: {e}")
        return 1

    unknown = sum(1 for _, instruction in instructions if instruction.is_unknown)
    logger.info(f"Decoded {len(instructions)} instructions ({unknown} unknown)")
    return 0
