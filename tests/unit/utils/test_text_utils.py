"""Tests unitarios para la normalización de texto."""

import pytest

from app.utils.text_utils import remove_diacritics


class TestRemoveDiacritics:
    """Tests para remove_diacritics."""

    def test_removes_acute_accent(self):
        assert remove_diacritics("Ségur") == "Segur"

    def test_full_street_line(self):
        assert remove_diacritics("20 avenue de Ségur") == "20 avenue de Segur"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Besançon", "Besancon"),
            ("Köln", "Koln"),
            ("Île-de-France", "Ile-de-France"),
            ("ÀÉÎÕÜ", "AEIOU"),
        ],
    )
    def test_various_marks(self, text, expected):
        assert remove_diacritics(text) == expected

    def test_is_idempotent(self):
        """Aplicarla dos veces da el mismo resultado."""
        once = remove_diacritics("Hôtel de Ville, Orléans")
        assert remove_diacritics(once) == once

    def test_empty_string(self):
        assert remove_diacritics("") == ""

    def test_non_decomposable_characters_pass_through(self):
        """Caracteres sin descomposición (ß, ø, œ) no se modifican."""
        assert remove_diacritics("Straße Søren Œuvre") == "Straße Søren Œuvre"

    def test_plain_ascii_unchanged(self):
        assert remove_diacritics("Rue de Rivoli 75001") == "Rue de Rivoli 75001"
