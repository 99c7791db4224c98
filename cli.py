#!/usr/bin/env python3
"""
Huffman codec command line interface.

Compresses a file to <input>.hf and decompresses .hf files back.

Note: Arguments are read from sys.argv directly: an optional debug level,
an optional -d mode flag, then one path.

Usage:
    python cli.py [--debug N] <input>
    python cli.py [--debug N] -d <input.hf>

Examples:
    python cli.py notes.txt              # compress
    python cli.py -d notes.txt.hf        # decompress
"""

import logging
import os
import sys

from huffcodec import HuffException, __version__
from huffcodec.bitbuffer import BitBuffer
from huffcodec.bitreader import BitReader
from huffcodec.compress import Compressor
from huffcodec.constants import DEBUG_HIGH
from huffcodec.decompress import Decompressor

COMPRESSED_SUFFIX = ".hf"
DECOMPRESSED_SUFFIX = ".unhf"

BANNER = """
  _            __  __
 | |__  _   _ / _|/ _|
 | '_ \\| | | | |_| |_
 | | | | |_| |  _|  _|
 |_| |_|\\__,_|_| |_|
"""


def print_version() -> None:
    """Print version information."""
    print(f"huffcodec {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(BANNER)
    print(f"Huffman Stream Codec (v{__version__})")
    print("=" * 49)
    print()
    print("Usage:")
    print(f"  {prog_name} [--debug N] <input>")
    print(f"  {prog_name} [--debug N] -d <input{COMPRESSED_SUFFIX}>")
    print()
    print("Options:")
    print("  -d             Decompress (default is compress)")
    print(f"  -g, --debug N  Debug level 0-{DEBUG_HIGH} (logged to stderr)")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Output:")
    print(f"  Compress:   <input>{COMPRESSED_SUFFIX}")
    print(
        f"  Decompress: <input>{DECOMPRESSED_SUFFIX} "
        f"(or <base>{DECOMPRESSED_SUFFIX} if input ends in {COMPRESSED_SUFFIX})"
    )
    print()
    print("Examples:")
    print(f"  {prog_name} notes.txt              # compress")
    print(f"  {prog_name} -d notes.txt{COMPRESSED_SUFFIX}        # decompress")
    print()


def make_decompress_filename(input_path: str) -> str:
    """Create output filename for decompression.

    Removes the compressed suffix if present, then appends .unhf.
    """
    if input_path.endswith(COMPRESSED_SUFFIX):
        return input_path[: -len(COMPRESSED_SUFFIX)] + DECOMPRESSED_SUFFIX
    return input_path + DECOMPRESSED_SUFFIX


def read_input(input_path: str) -> "BitReader | None":
    """Open input_path and wrap its contents in a BitReader."""
    try:
        with open(input_path, "rb") as f:
            return BitReader.from_file(f)
    except OSError as e:
        print(f"Error: Cannot open input file: {input_path} ({e})", file=sys.stderr)
        return None


def run_to_file(processor, reader: BitReader, output_path: str, action: str) -> "bytes | None":
    """Run processor from reader into output_path.

    The output file is removed again if the codec fails, since its
    contents are unusable.

    Returns:
        The bytes written, or None on error.
    """
    try:
        with open(output_path, "wb") as f:
            try:
                return processor(reader, BitBuffer(f))
            except HuffException as e:
                print(f"Error: {action} failed: {e}", file=sys.stderr)
        os.remove(output_path)
    except OSError as e:
        print(f"Error: Cannot write output file: {output_path} ({e})", file=sys.stderr)
    return None


def do_compress(input_path: str, debug: int = 0) -> int:
    """Compress a file.

    Args:
        input_path: Input file path.
        debug: Debug level.

    Returns:
        0 on success, 1 on error.
    """
    reader = read_input(input_path)
    if reader is None:
        return 1

    output_path = f"{input_path}{COMPRESSED_SUFFIX}"
    input_size = reader.remaining // 8

    comp = Compressor(debug=debug)
    output_data = run_to_file(comp.compress, reader, output_path, "Compression")
    if output_data is None:
        return 1

    ratio = input_size / len(output_data) if len(output_data) > 0 else 0
    print(f"Input:       {input_path} ({input_size} bytes)")
    print(f"Output:      {output_path} ({len(output_data)} bytes)")
    print(f"Ratio:       {ratio:.2f}x")
    print(f"Header:      {comp.header_bits} bits, body {comp.body_bits} bits")

    return 0


def do_decompress(input_path: str, debug: int = 0) -> int:
    """Decompress a file.

    Args:
        input_path: Compressed input file path.
        debug: Debug level.

    Returns:
        0 on success, 1 on error.
    """
    reader = read_input(input_path)
    if reader is None:
        return 1

    if reader.remaining == 0:
        print("Error: Input file is empty", file=sys.stderr)
        return 1

    output_path = make_decompress_filename(input_path)
    input_size = reader.remaining // 8

    decomp = Decompressor(debug=debug)
    output_data = run_to_file(decomp.decompress, reader, output_path, "Decompression")
    if output_data is None:
        return 1

    expansion = len(output_data) / input_size if input_size > 0 else 0
    print(f"Input:       {input_path} ({input_size} bytes)")
    print(f"Output:      {output_path} ({len(output_data)} bytes)")
    print(f"Expansion:   {expansion:.2f}x")

    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"
    args = args[1:]

    if not args:
        print_help(prog_name)
        return 1

    if args[0] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[0] in ("-v", "--version"):
        print_version()
        return 0

    # Flags may appear in any order; everything else is an input file
    debug = 0
    decompress_mode = False
    files = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "-d":
            decompress_mode = True
        elif arg in ("-g", "--debug"):
            if i + 1 >= len(args):
                print("Error: --debug requires a level", file=sys.stderr)
                return 1
            try:
                debug = int(args[i + 1])
            except ValueError:
                print("Error: debug level must be an integer", file=sys.stderr)
                return 1
            if debug < 0 or debug > DEBUG_HIGH:
                print(f"Error: debug level must be 0-{DEBUG_HIGH}", file=sys.stderr)
                return 1
            i += 1
        else:
            files.append(arg)
        i += 1

    if debug > 0:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )

    args = files
    if len(args) != 1:
        mode = "Decompress" if decompress_mode else "Compress"
        print(f"Error: {mode} requires exactly 1 input file", file=sys.stderr)
        print(
            f"Usage: {prog_name} [--debug N] [-d] <input>",
            file=sys.stderr,
        )
        return 1

    if decompress_mode:
        return do_decompress(args[0], debug)
    return do_compress(args[0], debug)


if __name__ == "__main__":
    sys.exit(main())
