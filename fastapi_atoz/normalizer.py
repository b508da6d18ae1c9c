"""Normalization of raw alphabetic filter input."""

from typing import Any, Optional

from fastapi_atoz.models import LETTERS, SYMBOLS_TOKEN, CanonicalFilter

_ASCII_FOLD = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", LETTERS)


def ascii_lower(value: str) -> str:
    """
    Lowercase A-Z only.

    ``str.lower`` folds non-ASCII characters too (e.g. the Kelvin sign becomes
    ``k``), which would let them leak into the letter buckets.

    Args:
        value: String to fold

    Returns:
        str: String with A-Z replaced by a-z
    """
    return value.translate(_ASCII_FOLD)


def normalize(raw: Optional[Any], symbols_token: str = SYMBOLS_TOKEN) -> CanonicalFilter:
    """
    Normalize an untrusted filter value into a canonical filter.

    Normalization is total: every input maps to exactly one of ``NONE``,
    ``LETTER`` or ``SYMBOLS`` and nothing is ever rejected. Only the first
    character is considered, so ``"Banana"`` selects ``b``.

    Args:
        raw: Raw value, typically a query parameter
        symbols_token: Sentinel that explicitly selects the symbols bucket

    Returns:
        CanonicalFilter: The canonical filter

    Example:
        normalize("B")    # LETTER('b')
        normalize("sym")  # SYMBOLS
        normalize("7up")  # SYMBOLS
        normalize("")     # NONE
    """
    if raw is None:
        return CanonicalFilter.none()
    if not isinstance(raw, str):
        raw = str(raw)
    if raw == "":
        return CanonicalFilter.none()

    folded = ascii_lower(raw)
    if symbols_token and folded == ascii_lower(symbols_token):
        return CanonicalFilter.symbols()

    first = folded[0]
    if first in LETTERS:
        return CanonicalFilter.for_letter(first)
    return CanonicalFilter.symbols()
