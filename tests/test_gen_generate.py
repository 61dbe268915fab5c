"""Tests for sampling from compiled generators."""

from __future__ import annotations

import random
import threading

from conlang.gen import PhonemeGenerator, Word, WordGenerator
from conlang.phone import Consonant, Syllable, Vowel


class TestSampling:
    """Every drawn phoneme comes from its slot's candidates."""

    def test_draws_stay_within_candidates(self, small_inventory, rng):
        gen = WordGenerator.parse("CV NVL B", small_inventory)
        for _ in range(200):
            word = gen.generate(rng)
            assert len(word) == len(gen.syllables)
            for syllable, syl_gen in zip(word, gen.syllables):
                assert len(syllable) == len(syl_gen.phonemes)
                for phoneme, slot in zip(syllable, syl_gen.phonemes):
                    assert phoneme in slot.choices

    def test_seeded_is_reproducible(self, full_inventory):
        gen = WordGenerator.parse("CVC CV", full_inventory)
        first = [gen.generate(random.Random(99)) for _ in range(5)]
        second = [gen.generate(random.Random(99)) for _ in range(5)]
        assert first == second

    def test_single_choice_slot(self, rng):
        slot = PhonemeGenerator("C", (Consonant.K,))
        assert all(slot.generate(rng) is Consonant.K for _ in range(20))

    def test_weights_do_not_change_policy(self):
        slot = PhonemeGenerator("V", (Vowel.A, Vowel.I))
        weighted = slot.with_weights([100, 1])
        a = [slot.generate(random.Random(5)) for _ in range(10)]
        b = [weighted.generate(random.Random(5)) for _ in range(10)]
        assert a == b

    def test_uses_modulo_of_64_bit_draw(self):
        slot = PhonemeGenerator("V", (Vowel.A, Vowel.E, Vowel.I))
        expected_rng = random.Random(42)
        index = expected_rng.getrandbits(64) % 3
        assert slot.generate(random.Random(42)) is slot.choices[index]

    def test_all_candidates_reachable(self, small_inventory, rng):
        gen = WordGenerator.parse("V", small_inventory)
        seen = {gen.generate(rng)[0][0] for _ in range(500)}
        assert seen == set(small_inventory.vowels)

    def test_generator_not_mutated(self, small_inventory, rng):
        gen = WordGenerator.parse("CVC", small_inventory)
        before = WordGenerator.parse("CVC", small_inventory)
        for _ in range(50):
            gen.generate(rng)
        assert gen == before


class TestWord:
    def test_rendering(self):
        word = Word([
            Syllable([Consonant.K, Vowel.A]),
            Syllable([Consonant.N, Vowel.I, Consonant.L]),
        ])
        assert str(word) == "ka nil"
        assert repr(word) == "Word('ka nil')"
        assert word[1] == Syllable.parse("nil")

    def test_generated_word_renders(self, small_inventory, rng):
        word = WordGenerator.parse("CV CV", small_inventory).generate(rng)
        text = str(word)
        assert text.count(" ") == 1
        assert all(len(part) == 2 for part in text.split(" "))


class TestConcurrentSampling:
    """A compiled generator can be shared read-only across threads."""

    def test_threads_with_own_rng(self, full_inventory):
        gen = WordGenerator.parse("CVC", full_inventory)
        results: dict[int, list[Word]] = {}

        def worker(seed: int) -> None:
            local = random.Random(seed)
            results[seed] = [gen.generate(local) for _ in range(100)]

        threads = [threading.Thread(target=worker, args=(s,)) for s in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for seed, words in results.items():
            local = random.Random(seed)
            assert words == [gen.generate(local) for _ in range(100)]
