"""
Product name normalization.

Two names are duplicates when they compare equal after folding the
look-alike Arabic/Persian letter forms, trimming and lowercasing.
"""

import unicodedata
from collections.abc import Iterable

from stockbook.core.entities.product import Product

# Arabic code points that render like their Persian counterparts
_LETTER_FOLDS = str.maketrans(
    {
        "\u064a": "\u06cc",  # ARABIC LETTER YEH -> FARSI YEH
        "\u0649": "\u06cc",  # ARABIC LETTER ALEF MAKSURA -> FARSI YEH
        "\u0643": "\u06a9",  # ARABIC LETTER KAF -> KEHEH
    }
)


def normalize_name(name: str) -> str:
    """Normalize a name for duplicate comparison."""
    # NFKC maps presentation forms (isolated/final/medial) to base letters
    result = unicodedata.normalize("NFKC", name)
    return result.translate(_LETTER_FOLDS).strip().lower()


def is_duplicate_name(a: str, b: str) -> bool:
    return normalize_name(a) == normalize_name(b)


def find_duplicate(
    products: Iterable[Product],
    name: str,
    exclude_id: str | None = None,
) -> Product | None:
    """
    Find the first product whose name duplicates name.

    Args:
        products: Products to check against.
        name: Candidate name.
        exclude_id: Id of the product being edited, which never counts
            as its own duplicate.

    Returns:
        The conflicting product, or None.
    """
    normalized = normalize_name(name)
    for product in products:
        if exclude_id is not None and product.id == exclude_id:
            continue
        if normalize_name(product.name) == normalized:
            return product
    return None
