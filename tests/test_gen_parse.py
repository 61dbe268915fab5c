"""Tests for pattern compilation: WordGenerator / SyllableGenerator / PhonemeGenerator."""

from __future__ import annotations

import pytest

from conlang.gen import PhonemeGenerator, SyllableGenerator, WordGenerator
from conlang.inventory.models import Inventory
from conlang.phone import (
    Consonant,
    EmptySlotError,
    Manner,
    NoInputError,
    ParseError,
    Place,
    UnknownCharacterError,
    UnsupportedSyntaxError,
    Vowel,
)


class TestClassPatterns:
    """Patterns built from C and V only."""

    @pytest.mark.parametrize("pattern", ["C", "V", "CV", "VVC", "CVC CV", "V CCV VC"])
    def test_shape(self, pattern, full_inventory):
        gen = WordGenerator.parse(pattern, full_inventory)
        segments = pattern.split()
        assert len(gen.syllables) == len(segments)
        for syl_gen, segment in zip(gen.syllables, segments):
            assert len(syl_gen.phonemes) == len(segment)

    def test_c_and_v_candidates(self, small_inventory):
        gen = WordGenerator.parse("CV", small_inventory)
        c_slot, v_slot = gen.syllables[0].phonemes
        assert c_slot.choices == small_inventory.consonants
        assert v_slot.choices == small_inventory.vowels
        assert c_slot.display == "C"
        assert v_slot.display == "V"


class TestFilterPatterns:
    """Place and manner trigger letters."""

    def test_bilabial_filter_on_full_catalog(self, full_inventory):
        gen = WordGenerator.parse("B", full_inventory)
        choices = gen.syllables[0].phonemes[0].choices
        assert set(choices) == {
            Consonant.P, Consonant.B, Consonant.M,
            Consonant.PHI, Consonant.BETA, Consonant.B_TRILL,
        }

    @pytest.mark.parametrize("place", list(Place), ids=lambda p: p.name)
    def test_place_filter_is_exact_subset(self, place, full_inventory):
        gen = WordGenerator.parse(place.code, full_inventory)
        choices = gen.syllables[0].phonemes[0].choices
        expected = tuple(c for c in full_inventory.consonants if c.place is place)
        assert choices == expected

    @pytest.mark.parametrize("manner", list(Manner), ids=lambda m: m.name)
    def test_manner_filter_is_exact_subset(self, manner, full_inventory):
        gen = WordGenerator.parse(manner.code, full_inventory)
        choices = gen.syllables[0].phonemes[0].choices
        expected = tuple(c for c in full_inventory.consonants if c.manner is manner)
        assert choices == expected

    def test_filter_respects_inventory(self, small_inventory):
        gen = WordGenerator.parse("NV", small_inventory)
        assert gen.syllables[0].phonemes[0].choices == (Consonant.M, Consonant.N)

    def test_empty_filter_is_parse_error(self, small_inventory):
        # No retroflex consonants in the small inventory
        with pytest.raises(EmptySlotError) as exc_info:
            WordGenerator.parse("RV", small_inventory)
        assert exc_info.value.glyph == "R"

    def test_empty_class_is_parse_error(self):
        inv = Inventory([Consonant.P], [])
        with pytest.raises(EmptySlotError):
            WordGenerator.parse("CV", inv)
        assert str(WordGenerator.parse("C", inv)) == "C"


class TestErrors:
    """Parse-time failures."""

    def test_empty_pattern(self, full_inventory):
        with pytest.raises(NoInputError):
            WordGenerator.parse("", full_inventory)

    @pytest.mark.parametrize("pattern", [" ", "   ", "\t\n "])
    def test_whitespace_pattern(self, pattern, full_inventory):
        with pytest.raises(NoInputError):
            WordGenerator.parse(pattern, full_inventory)

    @pytest.mark.parametrize("char", ["x", "1", "!", "c", "v", "?"])
    def test_unknown_character(self, char, full_inventory):
        with pytest.raises(UnknownCharacterError) as exc_info:
            WordGenerator.parse(f"CV{char}", full_inventory)
        assert exc_info.value.char == char

    def test_first_unknown_reported(self, full_inventory):
        with pytest.raises(UnknownCharacterError) as exc_info:
            WordGenerator.parse("C1 V2", full_inventory)
        assert exc_info.value.char == "1"

    @pytest.mark.parametrize("pattern", ["[ptk]V", "C(V)", "CV [a]"])
    def test_reserved_groups_unsupported(self, pattern, full_inventory):
        with pytest.raises(UnsupportedSyntaxError):
            WordGenerator.parse(pattern, full_inventory)

    def test_unsupported_is_not_unknown_character(self, full_inventory):
        with pytest.raises(NotImplementedError) as exc_info:
            WordGenerator.parse("[", full_inventory)
        assert not isinstance(exc_info.value, ParseError)

    def test_parse_is_deterministic(self, full_inventory):
        messages = set()
        for _ in range(3):
            with pytest.raises(UnknownCharacterError) as exc_info:
                WordGenerator.parse("CVq", full_inventory)
            messages.add(str(exc_info.value))
        assert messages == {"unrecognized character 'q'"}

    def test_syllable_generator_empty(self, full_inventory):
        with pytest.raises(NoInputError):
            SyllableGenerator.parse("", full_inventory)

    def test_phoneme_generator_empty(self, full_inventory):
        with pytest.raises(NoInputError):
            PhonemeGenerator.parse("", full_inventory)


class TestRendering:
    """str() reproduces the pattern modulo whitespace."""

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("CVC", "CVC"),
            ("CV CVC", "CV CVC"),
            ("  CV\t\tBVN \n", "CV BVN"),
            ("PVL  ZV", "PVL ZV"),
        ],
    )
    def test_display_round_trip(self, pattern, expected, full_inventory):
        gen = WordGenerator.parse(pattern, full_inventory)
        assert str(gen) == expected
        assert repr(gen) == f"WordGenerator({expected})"

    def test_display_reparses_equal(self, full_inventory):
        gen = WordGenerator.parse("CV  SVK", full_inventory)
        assert WordGenerator.parse(str(gen), full_inventory) == gen


class TestPhonemeGenerator:
    """Slot-level parsing and invariants."""

    def test_parse_returns_rest(self, full_inventory):
        slot, rest = PhonemeGenerator.parse("CVC", full_inventory)
        assert slot.display == "C"
        assert rest == "VC"

    def test_place_tried_before_manner(self, full_inventory):
        slot, _ = PhonemeGenerator.parse("B", full_inventory)
        assert all(c.place is Place.BILABIAL for c in slot.choices)

    def test_empty_choices_rejected(self):
        with pytest.raises(EmptySlotError):
            PhonemeGenerator(display="C", choices=())

    def test_weights_length_checked(self):
        with pytest.raises(ValueError, match="weights length"):
            PhonemeGenerator("V", (Vowel.A, Vowel.I), weights=(1,))

    def test_with_weights(self):
        slot = PhonemeGenerator("V", (Vowel.A, Vowel.I))
        weighted = slot.with_weights([3, 1])
        assert weighted.weights == (3, 1)
        assert weighted.choices == slot.choices
        assert slot.weights == ()

    def test_equality_ignores_display(self):
        a = PhonemeGenerator("C", (Consonant.P,))
        b = PhonemeGenerator("B", (Consonant.P,))
        assert a == b
        assert hash(a) == hash(b)
        assert a != a.with_weights([2])
