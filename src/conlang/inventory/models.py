"""Data model for a phoneme inventory.

Pure data container with no I/O. An inventory is the working phoneme pool
for one generation session: the subset of the catalog a language uses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from conlang.phone.consonants import Consonant
from conlang.phone.errors import ParseError, UnknownCharactersError
from conlang.phone.non_pulmonic import NonPulmonicConsonant
from conlang.phone.symbols import parse_all
from conlang.phone.vowels import Vowel


class InventoryParseError(ParseError):
    """An inventory string or code list could not be read.

    Attributes:
        problems: One message per failing family, e.g.
            ``["unknown consonants: 1, 2"]``.
    """

    def __init__(self, problems: list[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = list(problems)


@dataclass(frozen=True)
class Inventory:
    """The consonants, vowels and non-pulmonics in play for one language.

    Order is preserved and no deduplication is performed; the inventory is
    logically a set. Immutable once built.

    Attributes:
        consonants: Selected pulmonic consonants.
        vowels: Selected vowels.
        non_pulmonics: Selected clicks and implosives.
    """

    consonants: tuple[Consonant, ...]
    vowels: tuple[Vowel, ...]
    non_pulmonics: tuple[NonPulmonicConsonant, ...] = ()

    def __init__(
        self,
        consonants: Iterable[Consonant],
        vowels: Iterable[Vowel],
        non_pulmonics: Iterable[NonPulmonicConsonant] = (),
    ) -> None:
        object.__setattr__(self, "consonants", tuple(consonants))
        object.__setattr__(self, "vowels", tuple(vowels))
        object.__setattr__(self, "non_pulmonics", tuple(non_pulmonics))

    # --- Construction ---

    @classmethod
    def full(cls) -> Inventory:
        """Inventory holding every catalog constant."""
        return cls(Consonant.all(), Vowel.all(), NonPulmonicConsonant.all())

    @classmethod
    def from_codes(
        cls,
        consonants: str | None = None,
        vowels: str | None = None,
        non_pulmonics: str | None = None,
    ) -> Inventory:
        """Build an inventory from concatenated IPA codes.

        Any family left as None falls back to its whole catalog.

        Args:
            consonants: Consonant codes, e.g. ``"ptkmn"``.
            vowels: Vowel codes, e.g. ``"aiu"``.
            non_pulmonics: Click/implosive codes, e.g. ``"ʘɓ"``.

        Raises:
            InventoryParseError: Listing unknown codes for every family
                that had any.
        """
        problems: list[str] = []
        selected: list[tuple] = []
        for family, codes, label in (
            (Consonant, consonants, "consonants"),
            (Vowel, vowels, "vowels"),
            (NonPulmonicConsonant, non_pulmonics, "non-pulmonics"),
        ):
            if codes is None:
                selected.append(family.all())
                continue
            try:
                selected.append(tuple(parse_all(family, codes)))
            except UnknownCharactersError as exc:
                problems.append(f"unknown {label}: {', '.join(exc.chars)}")
                selected.append(())

        if problems:
            raise InventoryParseError(problems)
        return cls(*selected)

    @classmethod
    def parse(cls, text: str) -> Inventory:
        """Read the textual form produced by ``str(inventory)``.

        The form is consonant codes, a single space, vowel codes, and
        optionally another space followed by non-pulmonic codes:
        ``"ptkmn aiu"`` or ``"ptkmn aiu ʘɓ"``.

        An empty segment is an empty family, so a vowel-less inventory with
        non-pulmonics renders with two consecutive spaces (``"p  ʘ"``).

        Raises:
            InventoryParseError: On a malformed string or unknown codes.
        """
        segments = text.split(" ")
        if len(segments) < 2:
            raise InventoryParseError(["no space in input"])
        if len(segments) > 3:
            raise InventoryParseError(
                [f"expected at most 3 segments, got {len(segments)}"]
            )
        if len(segments) == 2:
            segments.append("")
        consonants, vowels, non_pulmonics = segments
        try:
            return cls.from_codes(consonants, vowels, non_pulmonics)
        except InventoryParseError as exc:
            if vowels or not non_pulmonics:
                raise
            raise InventoryParseError(
                ["vowel segment is empty (consecutive spaces)"] + exc.problems
            ) from exc

    # --- Summary ---

    @property
    def size(self) -> int:
        """Total number of phonemes."""
        return len(self.consonants) + len(self.vowels) + len(self.non_pulmonics)

    @property
    def is_empty(self) -> bool:
        """Whether no phoneme of any family is selected."""
        return self.size == 0

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain Python dict suitable for JSON serialization."""
        return {
            "consonants": [
                {"code": c.code, "place": c.place.label, "manner": c.manner.label}
                for c in self.consonants
            ],
            "vowels": [
                {
                    "code": v.code,
                    "height": v.height,
                    "frontness": v.frontness,
                    "rounded": v.rounded,
                }
                for v in self.vowels
            ],
            "non_pulmonics": [
                {"code": n.code, "click": n.is_click} for n in self.non_pulmonics
            ],
            "total": self.size,
        }

    def __str__(self) -> str:
        text = (
            "".join(c.code for c in self.consonants)
            + " "
            + "".join(v.code for v in self.vowels)
        )
        if self.non_pulmonics:
            text += " " + "".join(n.code for n in self.non_pulmonics)
        return text

    def __repr__(self) -> str:
        return (
            f"Inventory(consonants={len(self.consonants)}, "
            f"vowels={len(self.vowels)}, "
            f"non_pulmonics={len(self.non_pulmonics)})"
        )
