"""Vowels of the IPA chart with height, frontness and rounding."""

from __future__ import annotations

from conlang.phone.symbols import SymbolEnum


class Vowel(SymbolEnum):
    """A vowel, valued by its IPA code.

    Ordered close to open, and front to back within each height, with the
    unrounded member of each pair first.
    """

    I = "i"  # noqa: E741
    Y = "y"
    I_BAR = "ɨ"
    U_BAR = "ʉ"
    U_TURNED_M = "ɯ"
    U = "u"
    I_SMALL_CAP = "ɪ"
    Y_SMALL_CAP = "ʏ"
    UPSILON = "ʊ"
    E = "e"
    O_SLASH = "ø"
    E_REVERSED = "ɘ"
    O_BAR = "ɵ"
    RAMS_HORNS = "ɤ"
    O = "o"  # noqa: E741
    SCHWA = "ə"
    EPSILON = "ɛ"
    OE = "œ"
    EPSILON_REVERSED = "ɜ"
    EPSILON_CLOSED_REVERSED = "ɞ"
    V_TURNED = "ʌ"
    O_OPEN = "ɔ"
    AE = "æ"
    A_TURNED = "ɐ"
    A = "a"
    OE_SMALL_CAP = "ɶ"
    A_SCRIPT = "ɑ"
    A_SCRIPT_TURNED = "ɒ"

    @property
    def height(self) -> int:
        """Tongue height, 1 (open) to 9 (close)."""
        return _QUALITIES[self][0]

    @property
    def frontness(self) -> int:
        """Tongue advancement, 1 (back) to 9 (front)."""
        return _QUALITIES[self][1]

    @property
    def rounded(self) -> bool:
        """Whether the lips are rounded."""
        return _QUALITIES[self][2]


CLOSE, NEAR_CLOSE, CLOSE_MID, MID, OPEN_MID, NEAR_OPEN, OPEN = 9, 8, 6, 5, 4, 2, 1
FRONT, NEAR_FRONT, CENTRAL, NEAR_BACK, BACK = 9, 7, 5, 3, 1

# (height, frontness, rounded)
_QUALITIES: dict[Vowel, tuple[int, int, bool]] = {
    Vowel.I: (CLOSE, FRONT, False),
    Vowel.Y: (CLOSE, FRONT, True),
    Vowel.I_BAR: (CLOSE, CENTRAL, False),
    Vowel.U_BAR: (CLOSE, CENTRAL, True),
    Vowel.U_TURNED_M: (CLOSE, BACK, False),
    Vowel.U: (CLOSE, BACK, True),
    Vowel.I_SMALL_CAP: (NEAR_CLOSE, NEAR_FRONT, False),
    Vowel.Y_SMALL_CAP: (NEAR_CLOSE, NEAR_FRONT, True),
    Vowel.UPSILON: (NEAR_CLOSE, NEAR_BACK, True),
    Vowel.E: (CLOSE_MID, FRONT, False),
    Vowel.O_SLASH: (CLOSE_MID, FRONT, True),
    Vowel.E_REVERSED: (CLOSE_MID, CENTRAL, False),
    Vowel.O_BAR: (CLOSE_MID, CENTRAL, True),
    Vowel.RAMS_HORNS: (CLOSE_MID, BACK, False),
    Vowel.O: (CLOSE_MID, BACK, True),
    Vowel.SCHWA: (MID, CENTRAL, False),
    Vowel.EPSILON: (OPEN_MID, FRONT, False),
    Vowel.OE: (OPEN_MID, FRONT, True),
    Vowel.EPSILON_REVERSED: (OPEN_MID, CENTRAL, False),
    Vowel.EPSILON_CLOSED_REVERSED: (OPEN_MID, CENTRAL, True),
    Vowel.V_TURNED: (OPEN_MID, BACK, False),
    Vowel.O_OPEN: (OPEN_MID, BACK, True),
    Vowel.AE: (NEAR_OPEN, FRONT, False),
    Vowel.A_TURNED: (NEAR_OPEN, CENTRAL, False),
    Vowel.A: (OPEN, FRONT, False),
    Vowel.OE_SMALL_CAP: (OPEN, FRONT, True),
    Vowel.A_SCRIPT: (OPEN, BACK, False),
    Vowel.A_SCRIPT_TURNED: (OPEN, BACK, True),
}
