# Path: core/indexing/sorting.py
# Purpose: Locale-aware ordering of gallery entry names.
# Layer: core/indexing.
# Details: Approximates default collation: accents and case are ignored first, lower case wins ties.

from __future__ import annotations

import unicodedata
from typing import Tuple


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def name_sort_key(name: str) -> Tuple[str, str, str]:
    """Sort key so that "a" < "b" < "B" and "e" < "é" < "f"."""

    folded = name.casefold()
    return (_strip_accents(folded), folded, name.swapcase())
