# lc_norm_tool/shared/utils/text_utils.py

"""Text cleanup for catalog cells before call number parsing"""

# Standard library imports
from re import sub

# Third party imports
from unidecode import unidecode


def ascii_fold(text: str) -> str:
    """Convert accented and typographic characters to their ASCII equivalents

    Catalog exports often carry non-breaking spaces, full-width digits or
    smart punctuation that the ASCII-only recognizers would reject.

    Args:
        text: Input text

    Returns:
        Text with all characters transliterated to ASCII
    """
    if not text:
        return ""

    return unidecode(text)


def collapse_spaces(text: str) -> str:
    """Replace runs of whitespace with a single space and trim the ends"""
    if not text:
        return ""

    return sub(r"\s+", " ", text).strip()


def clean_cell(text: str | None, fold_unicode: bool = False) -> str:
    """Prepare a raw LC cell for parsing

    Args:
        text: Cell value as read, None for a missing cell
        fold_unicode: ASCII-fold the text first

    Returns:
        Trimmed (and optionally folded) cell text
    """
    if text is None:
        return ""

    if fold_unicode:
        text = ascii_fold(text)

    return text.strip()
