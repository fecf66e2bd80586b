import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from . import __version__
from .env import Settings, load_env, load_settings
from .errors import CharSimError, UsageError
from .frequency import character_frequencies
from .logger import StructuredLogger, get_logger
from .similarity import cosine_similarity
from .storage import format_score, write_result


@dataclass(frozen=True)
class ComparisonResult:
    original: Path
    copy: Path
    score: float
    text: str
    original_chars: int
    copy_chars: int


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with status 2 on bad input; that code means I/O failure here."""

    def error(self, message):
        raise UsageError(message)


def compare_files(original: Path, copy: Path) -> ComparisonResult:
    """
    Read both files and compute their character-frequency cosine similarity.

    Raises:
        FileReadError: either input cannot be read or decoded
    """
    logger = get_logger()
    original, copy = Path(original), Path(copy)

    freq_original = character_frequencies(original)
    original_chars = sum(freq_original.values())
    logger.record_file_read(original_chars)
    freq_copy = character_frequencies(copy)
    copy_chars = sum(freq_copy.values())
    logger.record_file_read(copy_chars)

    score = cosine_similarity(freq_original, freq_copy)
    logger.record_comparison()
    result = ComparisonResult(
        original=original,
        copy=copy,
        score=score,
        text=format_score(score),
        original_chars=original_chars,
        copy_chars=copy_chars,
    )
    logger.debug(
        "Compared files",
        original=str(original),
        copy=str(copy),
        distinct_original=len(freq_original),
        distinct_copy=len(freq_copy),
        score=score,
    )
    return result


def run(original: Path, copy: Path, output: Path) -> ComparisonResult:
    """Compare two files and write the formatted score to ``output``."""
    result = compare_files(original, copy)
    write_result(Path(output), result.text)
    get_logger().info(f"Similarity {result.text} written to {output}")
    return result


def build_parser() -> ArgumentParser:
    """
    Parser for the flags only; every token that is not a flag is a path.

    There is no ``-h`` and no abbreviation, so a file named ``-h.txt`` or
    ``--verb`` is never mistaken for an option.
    """
    parser = ArgumentParser(
        prog="charsim",
        usage="%(prog)s [--version] [--verbose] <original-file> <copy-file> <output-file>",
        description="Character-frequency cosine similarity between two text files",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr")
    return parser


def parse_args(parser: ArgumentParser, argv: List[str]):
    """
    Split ``argv`` into flags and paths.

    Tokens after a literal ``--`` are always paths.

    Raises:
        UsageError: malformed flag, or not exactly three paths
    """
    if "--" in argv:
        split = argv.index("--")
        head, tail = argv[:split], argv[split + 1:]
    else:
        head, tail = argv, []

    args, paths = parser.parse_known_args(head)
    args.paths = paths + tail
    if not args.version and len(args.paths) != 3:
        raise UsageError(
            f"expected 3 arguments (original, copy, output), got {len(args.paths)}"
        )
    return args


def _make_logger(settings: Settings, with_file: bool = True) -> StructuredLogger:
    log_dir = settings.log_dir if with_file else None
    try:
        logger = get_logger(level=settings.log_level, log_dir=log_dir)
    except OSError as e:
        logger = get_logger(level=settings.log_level)
        logger.warning(f"Log file disabled, cannot use {log_dir}: {e}")
    if settings.ignored_log_level is not None:
        logger.warning(
            f"Ignoring unknown CHARSIM_LOG_LEVEL={settings.ignored_log_level!r}, "
            f"using {settings.log_level}"
        )
    return logger


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(parser, list(argv))
    except UsageError as e:
        # Console only: nothing is read or created on a usage error
        logger = _make_logger(load_settings(), with_file=False)
        logger.record_failure(type(e).__name__)
        logger.error(parser.format_usage().strip())
        logger.error(f"Usage error: {e}")
        return e.exit_code

    if args.version:
        print(__version__)
        return 0

    # Load .env if present (CHARSIM_LOG_LEVEL, CHARSIM_LOG_DIR)
    load_env()
    logger = _make_logger(load_settings())
    if args.verbose:
        logger.set_console_level("DEBUG")

    original, copy, output = (Path(p) for p in args.paths)
    try:
        run(original, copy, output)
    except CharSimError as e:
        logger.record_failure(type(e).__name__)
        logger.error(str(e))
        return e.exit_code
    except Exception as e:
        logger.record_failure(type(e).__name__)
        logger.critical(f"Unexpected error: {type(e).__name__}: {e}")
        return CharSimError.exit_code
    finally:
        logger.log_metrics_summary()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
