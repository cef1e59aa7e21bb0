"""Label normalization for comparison.

Canonical form:
- Unicode NFC composition (decomposed accents are kept, not dropped)
- Lowercase
- Every character that is not a letter, digit, combining mark or whitespace
  removed (underscore counts as punctuation)
- Whitespace runs collapsed to a single space
- Leading/trailing whitespace removed

Diacritics are deliberately NOT folded: "Café" and "Cafe" are different
labels and can only meet through fuzzy matching. Marks with no precomposed
form (e.g. Devanagari vowel signs) survive NFC as separate characters and
are kept too.
"""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")

# Unicode major categories kept: Letter, Number, Mark
_KEPT_CATEGORIES = frozenset("LNM")


def _is_kept(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch)[0] in _KEPT_CATEGORIES


def normalize(text: str) -> str:
    """Normalize a label for comparison.

    Total and idempotent: ``normalize(normalize(s)) == normalize(s)``.

    Examples:
        "  Boiler  Room " -> "boiler room"
        "Kitchen — Main House" -> "kitchen main house"
        "Pool_Deck!" -> "pooldeck"
        "" -> ""
    """
    text = unicodedata.normalize("NFC", text)
    text = text.lower()
    text = "".join(ch for ch in text if _is_kept(ch))
    text = _WHITESPACE.sub(" ", text).strip()
    # Removing punctuation can bring composable characters together
    return unicodedata.normalize("NFC", text)
