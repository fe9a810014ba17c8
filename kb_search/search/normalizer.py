"""
Text normalization shared by every search component.
"""

import re
from typing import Optional

# Anything that is not a Latin/Cyrillic letter, a decimal digit or whitespace
NON_WORD_CHARS = re.compile(r"[^a-zа-яѐ-џ0-9\s]")


def normalize(text: Optional[str]) -> str:
    """
    Canonicalize text for comparison.

    - Lower-case
    - Fold "ё" to "е"
    - Replace punctuation and symbols with spaces
    - Collapse and trim whitespace

    Examples:
        "Протечка  крыши!" -> "протечка крыши"
        "Счётчик (ИПУ)" -> "счетчик ипу"
    """
    if not text:
        return ""

    lowered = text.lower().replace("ё", "е")
    return " ".join(NON_WORD_CHARS.sub(" ", lowered).split())
