from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path

from .frequency import ENCODING
from .errors import FileWriteError

SCORE_QUANTUM = Decimal("0.01")


def format_score(score: float) -> str:
    """
    Render a score with exactly two fractional digits.

    Ties round half-up on the shortest decimal form of the float, so 0.125
    gives "0.13" regardless of the platform's binary rounding.
    """
    return str(Decimal(repr(score)).quantize(SCORE_QUANTUM, rounding=ROUND_HALF_UP))


def write_result(path: Path, text: str) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileWriteError(f"Cannot create directory {path.parent}: {e}", path) from e

    try:
        with path.open("w", encoding=ENCODING, newline="") as f:
            f.write(text)
    except OSError as e:
        raise FileWriteError(f"Cannot write {path}: {e}", path) from e
