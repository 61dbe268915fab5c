"""Non-pulmonic consonants: clicks and voiced implosives.

Ejectives are written with a diacritic (``pʼ``) and have no
single-character code, so they are not part of the catalog.
"""

from __future__ import annotations

from conlang.phone.symbols import SymbolEnum


class NonPulmonicConsonant(SymbolEnum):
    """A click or implosive, valued by its IPA code."""

    # Clicks
    BILABIAL_CLICK = "ʘ"
    DENTAL_CLICK = "ǀ"
    POST_ALVEOLAR_CLICK = "ǃ"
    PALATOALVEOLAR_CLICK = "ǂ"
    ALVEOLAR_LATERAL_CLICK = "ǁ"
    # Voiced implosives
    B_HOOK = "ɓ"
    D_HOOK = "ɗ"
    J_BAR_HOOK = "ʄ"
    G_HOOK = "ɠ"
    G_SMALL_CAP_HOOK = "ʛ"

    @property
    def is_click(self) -> bool:
        """True for clicks, False for implosives."""
        return self in _CLICKS


_CLICKS = frozenset({
    NonPulmonicConsonant.BILABIAL_CLICK,
    NonPulmonicConsonant.DENTAL_CLICK,
    NonPulmonicConsonant.POST_ALVEOLAR_CLICK,
    NonPulmonicConsonant.PALATOALVEOLAR_CLICK,
    NonPulmonicConsonant.ALVEOLAR_LATERAL_CLICK,
})
