"""Tests for label normalization."""

import pytest

from catalog_resolver.utils.normalize import normalize


class TestNormalize:
    """Tests for normalize function."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Kitchen", "kitchen"),
            ("  Boiler  Room ", "boiler room"),
            ("Kitchen — Main House", "kitchen main house"),
            ("Pool_Deck!", "pooldeck"),
            ("Flat 2B, 1st floor", "flat 2b 1st floor"),
            ("tab\tand\nnewline", "tab and newline"),
            ("", ""),
            ("   ", ""),
            ("!!!", ""),
        ],
    )
    def test_canonical_form(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    def test_diacritics_are_kept(self) -> None:
        assert normalize("Café") == "café"
        assert normalize("Café") != normalize("Cafe")

    def test_decomposed_accent_matches_composed(self) -> None:
        """A decomposed accent is composed, not stripped as punctuation."""
        assert normalize("Cafe\u0301") == normalize("Caf\u00e9") == "caf\u00e9"

    def test_non_latin_letters_are_kept(self) -> None:
        assert normalize("Küche Ост") == "küche ост"

    def test_combining_marks_without_precomposed_form_are_kept(self) -> None:
        """Devanagari vowel signs have no NFC form and must not be stripped."""
        ki = "कि"
        ka = "क"
        assert normalize(ki) == ki
        assert normalize(ki) != normalize(ka)

    @pytest.mark.parametrize(
        "raw",
        [
            "Kitchen — Main House",
            "  MIXED case\tInput!! ",
            "Café & Bar",
            "a_b-c.d",
            "",
            "İstanbul",
        ],
    )
    def test_idempotent(self, raw: str) -> None:
        once = normalize(raw)
        assert normalize(once) == once
