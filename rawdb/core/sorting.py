"""Locale-aware ordering for records.

Records compare the way a natural-language collation orders them rather than
by code point: accents and case are ignored first, then accents break ties,
then case (lowercase first), then the raw text. The key is independent of the
process locale so sorted output is the same on every machine.
"""

import unicodedata


def _remove_accents(text: str) -> str:
    """Remove diacritical marks from text."""
    nfd = unicodedata.normalize("NFD", text)
    return "".join(char for char in nfd if unicodedata.category(char) != "Mn")


def collation_key(text: str) -> tuple[str, str, str, str]:
    """Generate a sort key for a record.

    Args:
        text: Record text.

    Returns:
        Tuple comparing base letters, then accents, then case, then raw text.
    """
    folded = text.casefold()
    return (_remove_accents(folded), folded, text.swapcase(), text)


def sort_records(records: list[str], asc: bool = True) -> list[str]:
    """Sort records ascending or descending by collation key.

    Descending order is exactly the reverse of ascending order.
    """
    return sorted(records, key=collation_key, reverse=not asc)
