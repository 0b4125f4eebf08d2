"""Command-line filter: Tibetan script on stdin (or files), IAST on stdout."""
import argparse
import logging
import sys
from typing import Iterable, TextIO

from tibetan_iast.logs import setup_logging
from tibetan_iast.settings import Settings
from tibetan_iast.text.engine import TransliterationEngine

log = logging.getLogger("tibetan_iast")


def transliterate_stream(lines: Iterable[str], out: TextIO, final_newline: bool = True) -> list[str]:
    """
    Streams ``lines`` through one engine so state carries across line breaks.
    Returns the unmapped codepoints seen, e.g. ["U+0F02"].
    """
    engine = TransliterationEngine()
    for line in lines:
        out.write(engine.feed(line))
    out.write(engine.finish())
    if final_newline:
        out.write("\n")
    return engine.unknown_codepoints


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tibetan-iast",
        description="Transliterate Sanskrit written in Tibetan script into IAST.",
    )
    parser.add_argument("files", nargs="*", help="input files (UTF-8); stdin when omitted")
    parser.add_argument(
        "--no-final-newline",
        dest="final_newline",
        action="store_false",
        default=None,
        help="do not terminate the output with a newline",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    setup_logging((args.log_level or settings.log_level).upper())
    final_newline = settings.final_newline if args.final_newline is None else args.final_newline

    unknown: list[str] = []
    try:
        if not args.files:
            unknown = transliterate_stream(sys.stdin, sys.stdout, final_newline=final_newline)
        for path in args.files:
            with open(path, encoding="utf-8") as f:
                for code in transliterate_stream(f, sys.stdout, final_newline=final_newline):
                    if code not in unknown:
                        unknown.append(code)
    except UnicodeDecodeError as e:
        print(f"tibetan-iast: input is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"tibetan-iast: {e}", file=sys.stderr)
        return 1

    if unknown:
        log.warning("Unmapped codepoints: %s", ", ".join(unknown))
    return 0
