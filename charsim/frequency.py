from collections import Counter
from pathlib import Path

from .errors import FileReadError

ENCODING = "utf-8"


def normalize_line_endings(text: str) -> str:
    # "\r\n" first so the pair collapses to one newline, not two
    return text.replace("\r\n", "\n").replace("\r", "\n")


def count_characters(text: str) -> Counter:
    """Count every character of ``text`` after line-ending normalization."""
    return Counter(normalize_line_endings(text))


def read_text(path: Path) -> str:
    """
    Read the whole file as strict UTF-8.

    Newline translation is disabled here; ``normalize_line_endings`` does it
    explicitly so counting does not depend on the platform's I/O layer.

    Raises:
        FileReadError: file missing, unreadable, or not valid UTF-8
    """
    path = Path(path)
    try:
        with path.open("r", encoding=ENCODING, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(f"Cannot decode {path} as {ENCODING}: {e}", path) from e
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e}", path) from e


def character_frequencies(path: Path) -> Counter:
    return count_characters(read_text(path))
