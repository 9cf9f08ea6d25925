"""
Command-line tool: base-1024 encode or decode a file or standard input.

    base1024 [-d] [-w COLS] [--strict] [--alphabet FILE] [-o OUTPUT] [FILE]
"""

import argparse
import io
import os
import sys
from contextlib import nullcontext
from dataclasses import replace
from typing import IO, Iterable, Iterator, List, Optional

from Base1024.alphabet import Alphabet, analyze_alphabet, get_alphabet, load_alphabet
from Base1024.alphabet.constants import LISTING_PAD_FULL, LISTING_PAD_0
from Base1024.alphabet.loader import parse_code_point
from Base1024.codec.decoder import decode_stream
from Base1024.codec.encoder import encode_stream
from Base1024.config import CodecConfig
from Base1024.utils.io import ensure_dir, iter_text_blocks
from Base1024.utils.logging import get_logger
from Base1024.utils.timing import Timer
from Base1024.version import __version__

LINE_BREAKS = ("\n", "\r")


class WrappingWriter:
    """Text sink that breaks the output into lines of ``width`` symbols."""

    def __init__(self, stream: IO[str], width: int = 0):
        self.stream = stream
        self.width = width
        self.column = 0

    def write(self, text: str) -> None:
        if not self.width:
            self.stream.write(text)
            self.column += len(text)
            return

        while text:
            room = self.width - self.column
            piece, text = text[:room], text[room:]
            self.stream.write(piece)
            self.column += len(piece)
            if self.column == self.width:
                self.stream.write("\n")
                self.column = 0

    def finish(self) -> None:
        """Terminates a non-empty last line. Empty output stays empty."""
        if self.column:
            self.stream.write("\n")
            self.column = 0


def strip_line_breaks(blocks: Iterable[str]) -> Iterator[str]:
    for block in blocks:
        for brk in LINE_BREAKS:
            block = block.replace(brk, "")
        if block:
            yield block


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="base1024",
        description="Encode or decode data with a 1024-symbol alphabet (10 bits per symbol).",
    )
    parser.add_argument("file", nargs="?", default="-", help="input file (default: stdin)")
    parser.add_argument("-d", "--decode", action="store_true", help="decode data")
    parser.add_argument("-o", "--output", default="-", help="output file (default: stdout)")
    parser.add_argument("-w", "--wrap", type=int, default=None,
                        help="wrap encoded lines after COLS symbols, 0 disables wrapping")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="reject padding in positions an encoder never uses")
    parser.add_argument("--alphabet", metavar="FILE",
                        help="alphabet listing of hexadecimal code points")
    parser.add_argument("--pad-full", type=parse_code_point, default=LISTING_PAD_FULL,
                        help="PAD_FULL code point for --alphabet (default: %(default)X)")
    parser.add_argument("--pad-zero", type=parse_code_point, default=LISTING_PAD_0,
                        help="PAD_0 code point for --alphabet (default: %(default)X)")
    parser.add_argument("--check-alphabet", action="store_true",
                        help="check the alphabet table and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="report progress on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _open_input(path: str):
    if path == "-":
        return nullcontext(sys.stdin.buffer)
    return open(path, "rb")


def _open_output(path: str):
    if path == "-":
        return nullcontext(sys.stdout.buffer)
    directory = os.path.dirname(path)
    if directory:
        ensure_dir(directory)
    return open(path, "wb")


def run_encode(src: IO[bytes], dst: IO[bytes], config: CodecConfig, alphabet: Alphabet) -> int:
    text = io.TextIOWrapper(dst, encoding=config.text_encoding, errors=config.text_errors, newline="\n")
    try:
        writer = WrappingWriter(text, config.wrap)
        count = encode_stream(src, writer, alphabet=alphabet, read_size=config.read_size)
        writer.finish()
        text.flush()
    finally:
        text.detach()
    return count


def run_decode(src: IO[bytes], dst: IO[bytes], config: CodecConfig, alphabet: Alphabet) -> int:
    blocks = iter_text_blocks(
        src,
        encoding=config.text_encoding,
        errors=config.text_errors,
        read_size=config.read_size,
    )
    count = decode_stream(
        strip_line_breaks(blocks),
        dst,
        alphabet=alphabet,
        strict=config.strict,
        read_size=config.read_size,
    )
    dst.flush()
    return count


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger()

    try:
        overrides = {}
        if args.wrap is not None:
            overrides["wrap"] = args.wrap
        if args.strict is not None:
            overrides["strict"] = args.strict
        if args.verbose:
            overrides["log_level"] = "INFO"
        config = replace(CodecConfig.from_env(), **overrides)
        logger.set_level(config.log_level)

        if args.alphabet:
            alphabet = load_alphabet(args.alphabet, pad_full=args.pad_full, pad_0=args.pad_zero)
        else:
            alphabet = get_alphabet()

        if args.check_alphabet:
            report = analyze_alphabet(alphabet)
            print(report.summary())
            return 0 if report.ok else 1

        operation = "decode" if args.decode else "encode"
        with _open_input(args.file) as src, _open_output(args.output) as dst:
            with Timer() as timer:
                if args.decode:
                    count = run_decode(src, dst, config, alphabet)
                else:
                    count = run_encode(src, dst, config, alphabet)

        unit = "bytes" if args.decode else "symbols"
        logger.info(
            f"{operation} | {count} {unit} in {timer.elapsed:.4f}s "
            f"({timer.rate(count):.0f} {unit}/s)"
        )
    except (ValueError, OSError) as e:
        print(f"base1024: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
