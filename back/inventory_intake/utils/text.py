# inventory_intake/utils/text.py
from __future__ import annotations

from typing import Iterable, List, Optional


def upper_char(c: str) -> str:
    """Upper case of a single character, or the character itself when
    upper-casing would expand it ("ß" -> "SS")."""
    upper = c.upper()
    return upper if len(upper) == 1 else c


def split_words(text: str) -> List[str]:
    """Split on runs of whitespace, dropping empty tokens."""
    return text.split()


def capitalize_first(text: Optional[str]) -> Optional[str]:
    """
    Upper-cases only the first character, the rest is kept as is.
    "motivo de prueba" -> "Motivo de prueba"
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return text
    return upper_char(text[0]) + text[1:]


def capitalize_word(word: str) -> str:
    """First letter upper, the rest lower: "gADGETS" -> "Gadgets"."""
    word = word.lower()
    if not word:
        return word
    return upper_char(word[0]) + word[1:]


def capitalize_words(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return " ".join(capitalize_word(w) for w in split_words(text))


def blank_to_none(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    return text or None


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def contains_any(haystack: str, needles: Iterable[str]) -> bool:
    return any(needle in haystack for needle in needles)


def truncate(text: Optional[str], limit: int = 50) -> str:
    """
    Prefix for log lines. Anything present gets the "..." marker,
    absent values are rendered as "null".
    """
    if text is None:
        return "null"
    return text[:limit] + "..."


def mask_email(email: Optional[str]) -> Optional[str]:
    # jorge@example.com -> jo***@example.com, ab@x.com -> a***@x.com
    if email is None:
        return None
    local, at, domain = email.rpartition("@")
    if not at:
        return email
    keep = max(0, min(2, len(local) - 1))
    return f"{local[:keep]}***@{domain}"
