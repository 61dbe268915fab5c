"""Pulmonic consonants of the IPA chart.

Members are listed row by row (plosive, nasal, trill, tap, fricative,
lateral fricative, approximant, lateral approximant) and left to right
within a row, so ``Consonant.all()`` follows the chart.
"""

from __future__ import annotations

from conlang.phone.articulation import Manner, Place
from conlang.phone.symbols import SymbolEnum


class Consonant(SymbolEnum):
    """A pulmonic consonant, valued by its IPA code."""

    # Plosive
    P = "p"
    B = "b"
    T = "t"
    D = "d"
    T_RETROFLEX = "ʈ"
    D_RETROFLEX = "ɖ"
    C = "c"
    J_BAR = "ɟ"
    K = "k"
    G = "g"
    Q = "q"
    G_UVULAR = "ɢ"
    GLOTTAL_STOP = "ʔ"
    # Nasal
    M = "m"
    M_LABIODENTAL = "ɱ"
    N = "n"
    N_RETROFLEX = "ɳ"
    N_PALATAL = "ɲ"
    ENG = "ŋ"
    N_UVULAR = "ɴ"
    # Trill
    B_TRILL = "ʙ"
    R = "r"
    R_UVULAR = "ʀ"
    # Tap or flap
    V_TAP = "ⱱ"
    R_TAP = "ɾ"
    R_FLAP_RETROFLEX = "ɽ"
    # Fricative
    PHI = "ɸ"
    BETA = "β"
    F = "f"
    V = "v"
    THETA = "θ"
    ETH = "ð"
    S = "s"
    Z = "z"
    ESH = "ʃ"
    EZH = "ʒ"
    S_RETROFLEX = "ʂ"
    Z_RETROFLEX = "ʐ"
    C_CEDILLA = "ç"
    J_CURL = "ʝ"
    X = "x"
    GAMMA = "ɣ"
    CHI = "χ"
    R_INVERTED = "ʁ"
    H_BAR = "ħ"
    PHARYNGEAL_FRICATIVE = "ʕ"
    H = "h"
    H_HOOK = "ɦ"
    # Lateral fricative
    L_BELT = "ɬ"
    LEZH = "ɮ"
    # Approximant
    V_HOOK = "ʋ"
    R_TURNED = "ɹ"
    R_TURNED_RETROFLEX = "ɻ"
    J = "j"
    M_TURNED_LEG = "ɰ"
    # Lateral approximant
    L = "l"
    L_RETROFLEX = "ɭ"
    L_PALATAL = "ʎ"
    L_VELAR = "ʟ"

    @property
    def place(self) -> Place:
        """Point of articulation."""
        return _PLACES[self]

    @property
    def manner(self) -> Manner:
        """Mode of articulation."""
        return _MANNERS[self]


_PLACE_GROUPS: dict[Place, tuple[Consonant, ...]] = {
    Place.BILABIAL: (
        Consonant.P, Consonant.B, Consonant.M, Consonant.B_TRILL,
        Consonant.PHI, Consonant.BETA,
    ),
    Place.LABIODENTAL: (
        Consonant.M_LABIODENTAL, Consonant.V_TAP, Consonant.F, Consonant.V,
        Consonant.V_HOOK,
    ),
    Place.DENTAL: (Consonant.THETA, Consonant.ETH),
    Place.ALVEOLAR: (
        Consonant.T, Consonant.D, Consonant.N, Consonant.R, Consonant.R_TAP,
        Consonant.S, Consonant.Z, Consonant.L_BELT, Consonant.LEZH,
        Consonant.R_TURNED, Consonant.L,
    ),
    Place.POST_ALVEOLAR: (Consonant.ESH, Consonant.EZH),
    Place.RETROFLEX: (
        Consonant.T_RETROFLEX, Consonant.D_RETROFLEX, Consonant.N_RETROFLEX,
        Consonant.R_FLAP_RETROFLEX, Consonant.S_RETROFLEX,
        Consonant.Z_RETROFLEX, Consonant.R_TURNED_RETROFLEX,
        Consonant.L_RETROFLEX,
    ),
    Place.PALATAL: (
        Consonant.C, Consonant.J_BAR, Consonant.N_PALATAL,
        Consonant.C_CEDILLA, Consonant.J_CURL, Consonant.J,
        Consonant.L_PALATAL,
    ),
    Place.VELAR: (
        Consonant.K, Consonant.G, Consonant.ENG, Consonant.X,
        Consonant.GAMMA, Consonant.M_TURNED_LEG, Consonant.L_VELAR,
    ),
    Place.UVULAR: (
        Consonant.Q, Consonant.G_UVULAR, Consonant.N_UVULAR,
        Consonant.R_UVULAR, Consonant.CHI, Consonant.R_INVERTED,
    ),
    Place.PHARYNGEAL: (Consonant.H_BAR, Consonant.PHARYNGEAL_FRICATIVE),
    Place.GLOTTAL: (Consonant.GLOTTAL_STOP, Consonant.H, Consonant.H_HOOK),
}

_MANNER_GROUPS: dict[Manner, tuple[Consonant, ...]] = {
    Manner.PLOSIVE: (
        Consonant.P, Consonant.B, Consonant.T, Consonant.D,
        Consonant.T_RETROFLEX, Consonant.D_RETROFLEX, Consonant.C,
        Consonant.J_BAR, Consonant.K, Consonant.G, Consonant.Q,
        Consonant.G_UVULAR, Consonant.GLOTTAL_STOP,
    ),
    Manner.NASAL: (
        Consonant.M, Consonant.M_LABIODENTAL, Consonant.N,
        Consonant.N_RETROFLEX, Consonant.N_PALATAL, Consonant.ENG,
        Consonant.N_UVULAR,
    ),
    Manner.TRILL: (Consonant.B_TRILL, Consonant.R, Consonant.R_UVULAR),
    Manner.TAP: (Consonant.V_TAP, Consonant.R_TAP, Consonant.R_FLAP_RETROFLEX),
    Manner.FRICATIVE: (
        Consonant.PHI, Consonant.BETA, Consonant.F, Consonant.V,
        Consonant.THETA, Consonant.ETH, Consonant.S, Consonant.Z,
        Consonant.ESH, Consonant.EZH, Consonant.S_RETROFLEX,
        Consonant.Z_RETROFLEX, Consonant.C_CEDILLA, Consonant.J_CURL,
        Consonant.X, Consonant.GAMMA, Consonant.CHI, Consonant.R_INVERTED,
        Consonant.H_BAR, Consonant.PHARYNGEAL_FRICATIVE, Consonant.H,
        Consonant.H_HOOK,
    ),
    Manner.LATERAL_FRICATIVE: (Consonant.L_BELT, Consonant.LEZH),
    Manner.APPROXIMANT: (
        Consonant.V_HOOK, Consonant.R_TURNED, Consonant.R_TURNED_RETROFLEX,
        Consonant.J, Consonant.M_TURNED_LEG,
    ),
    Manner.LATERAL_APPROXIMANT: (
        Consonant.L, Consonant.L_RETROFLEX, Consonant.L_PALATAL,
        Consonant.L_VELAR,
    ),
}

_PLACES: dict[Consonant, Place] = {
    c: place for place, group in _PLACE_GROUPS.items() for c in group
}
_MANNERS: dict[Consonant, Manner] = {
    c: manner for manner, group in _MANNER_GROUPS.items() for c in group
}
