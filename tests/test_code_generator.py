"""Tests for random short code generation."""

import random
import re

import pytest

from shortlinks.services.code_generator import BASE62_CHARS, CodeGenerator


class TestCodeGenerator:
    """Test the random code generator."""

    def test_alphabet_is_base62(self):
        assert len(BASE62_CHARS) == 62
        assert len(set(BASE62_CHARS)) == 62

    def test_default_codes_are_six_alphanumeric_chars(self):
        generator = CodeGenerator()
        for _ in range(200):
            code = generator.generate()
            assert re.fullmatch(r"[A-Za-z0-9]{6}", code), code

    def test_space_size(self):
        assert CodeGenerator().space_size == 62 ** 6
        assert CodeGenerator(alphabet="ab", length=3).space_size == 8

    def test_seeded_rng_is_reproducible(self):
        first = CodeGenerator(rng=random.Random(42))
        second = CodeGenerator(rng=random.Random(42))
        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]

    def test_custom_alphabet_and_length(self):
        generator = CodeGenerator(alphabet="xy", length=4, rng=random.Random(0))
        for _ in range(50):
            code = generator.generate()
            assert len(code) == 4
            assert set(code) <= {"x", "y"}

    def test_every_character_is_reachable(self):
        generator = CodeGenerator(alphabet="abc", length=1, rng=random.Random(7))
        seen = {generator.generate() for _ in range(200)}
        assert seen == {"a", "b", "c"}

    @pytest.mark.parametrize("alphabet,length", [("", 6), ("ab", 0), ("ab", -1)])
    def test_rejects_degenerate_configuration(self, alphabet, length):
        with pytest.raises(ValueError):
            CodeGenerator(alphabet=alphabet, length=length)
