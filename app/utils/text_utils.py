"""
Utilidades de texto compartidas.

Este módulo contiene funciones para normalizar texto libre antes de
enviarlo a servicios externos que comparan cadenas sin acentos.
"""

import unicodedata


def remove_diacritics(text: str) -> str:
    """
    Elimina las marcas diacríticas de un texto.

    Descompone el texto (NFD), descarta las marcas combinantes y
    recompone el resultado (NFC). Los caracteres sin descomposición
    se mantienen intactos.

    Args:
        text: Texto libre a normalizar

    Returns:
        str: Texto sin acentos

    Examples:
        >>> remove_diacritics("20 avenue de Ségur")
        '20 avenue de Segur'
        >>> remove_diacritics("Köln")
        'Koln'
    """
    if not text:
        return text

    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if unicodedata.category(char) != "Mn")
    return unicodedata.normalize("NFC", stripped)
