"""
Text helpers for cleaning values scraped from menu pages.
"""
import re
from typing import Any, Optional


def clean_text(value: Any) -> Optional[str]:
    """
    Tidy a scraped text value without rewriting its characters.

    - Non-strings (None, numbers from JSON) are stringified or dropped
    - Runs of whitespace collapsed, ends stripped

    Returns None for values that end up empty.
    """
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = value if isinstance(value, str) else str(value)

    text = re.sub(r"\s+", " ", text).strip()

    return text or None
