"""Place and manner of articulation for pulmonic consonants.

Each member's value is the uppercase trigger letter that selects it in a
pattern (``B`` for bilabial, ``N`` for nasal, ...). Place and manner
triggers are disjoint from each other and from the class letters ``C`` and
``V``.
"""

from __future__ import annotations

from conlang.phone.symbols import SymbolEnum


class Place(SymbolEnum):
    """Point of articulation."""

    BILABIAL = "B"
    LABIODENTAL = "F"
    DENTAL = "D"
    ALVEOLAR = "A"
    POST_ALVEOLAR = "S"
    RETROFLEX = "R"
    PALATAL = "J"
    VELAR = "K"
    UVULAR = "Q"
    PHARYNGEAL = "H"
    GLOTTAL = "G"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"post-alveolar"``."""
        return self.name.lower().replace("_", "-")


class Manner(SymbolEnum):
    """Mode of articulation."""

    PLOSIVE = "P"
    NASAL = "N"
    TRILL = "T"
    TAP = "W"
    FRICATIVE = "Z"
    LATERAL_FRICATIVE = "X"
    APPROXIMANT = "Y"
    LATERAL_APPROXIMANT = "L"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"lateral fricative"``."""
        return self.name.lower().replace("_", " ")
