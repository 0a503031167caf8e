"""
Unit tests for password generation functionality.
"""

import string

import pytest

from passgen.config import Mode, build_config
from passgen.exceptions import ConfigurationError, EmptyCharsetError
from passgen.utils.charset import SYMBOLS, build_charset
from passgen.utils.password_generator import (
    CONSONANTS,
    VOWELS,
    PasswordGenerator,
    generate_memorable,
    generate_password,
    generate_pin,
    generate_random,
    memorable_pools,
)
from passgen.utils.random_source import SeededRandomSource, SystemRandomSource


class TestRandomSource:
    """Test randomness providers."""

    def test_seeded_source_is_deterministic(self):
        """Test that equal seeds give equal sequences."""
        first = SeededRandomSource(42)
        second = SeededRandomSource(42)

        assert [first.randbelow(1000) for _ in range(20)] == [second.randbelow(1000) for _ in range(20)]

    def test_system_source_range(self):
        """Test that the CSPRNG source stays in range."""
        rng = SystemRandomSource()
        for _ in range(200):
            assert 0 <= rng.randbelow(7) < 7

    def test_shuffle_keeps_items(self):
        """Test that shuffling is a permutation."""
        items = list(range(50))
        SeededRandomSource(1).shuffle(items)
        assert sorted(items) == list(range(50))

    def test_chance_bounds(self):
        """Test that 0% never and 100% always fires."""
        rng = SeededRandomSource(3)
        assert not any(rng.chance(0) for _ in range(100))
        assert all(rng.chance(100) for _ in range(100))

    def test_choice_empty(self):
        """Test choosing from an empty sequence."""
        with pytest.raises(IndexError):
            SeededRandomSource(0).choice("")


class TestRandomMode:
    """Test uniform random generation."""

    def test_length_and_charset(self):
        """Test that every character comes from the built charset."""
        rng = SeededRandomSource(7)
        for length in [1, 4, 16, 20, 64, 128]:
            config = build_config(length=length)
            charset = build_charset(config)
            candidate = generate_random(config, charset, rng)

            assert candidate.mode is Mode.RANDOM
            assert len(candidate.value) == length
            assert set(candidate.value) <= set(charset)

    def test_exclude_chars(self):
        """Test that excluded characters never appear."""
        config = build_config(length=10, exclude_chars="O0")
        generator = PasswordGenerator(config, SeededRandomSource(11))

        for _ in range(50):
            password = generator.generate().value
            assert "O" not in password
            assert "0" not in password

    def test_no_symbols(self):
        """Test that disabling symbols leaves letters and digits only."""
        config = build_config(length=20, use_symbols=False)
        generator = PasswordGenerator(config, SeededRandomSource(5))

        for _ in range(20):
            assert generator.generate().value.isalnum()

    def test_force_all_classes(self):
        """Test that every enabled class is present with force_all_classes."""
        config = build_config(length=4, force_all_classes=True)
        generator = PasswordGenerator(config, SeededRandomSource(13))

        for _ in range(100):
            password = generator.generate().value
            assert len(password) == 4
            assert any(c in string.ascii_uppercase for c in password)
            assert any(c in string.ascii_lowercase for c in password)
            assert any(c in string.digits for c in password)
            assert any(c in SYMBOLS for c in password)

    def test_force_all_classes_respects_exclusions(self):
        """Test that reserved slots use the filtered class alphabets."""
        config = build_config(length=8, force_all_classes=True, exclude_similar=True,
                              exclude_ambiguous=True)
        charset = build_charset(config)
        generator = PasswordGenerator(config, SeededRandomSource(17))

        for _ in range(50):
            assert set(generator.generate().value) <= set(charset)

    def test_force_all_classes_short_password(self):
        """Test that a password shorter than the class count keeps its length."""
        config = build_config(length=2, force_all_classes=True)
        password = PasswordGenerator(config, SeededRandomSource(19)).generate().value

        assert len(password) == 2

    def test_empty_charset_fails_before_generation(self):
        """Test that the generator refuses an empty charset up front."""
        config = build_config(use_uppercase=False, use_lowercase=False,
                              use_symbols=False, exclude_chars=string.digits)

        with pytest.raises(EmptyCharsetError):
            PasswordGenerator(config)


class TestMemorableMode:
    """Test pronounceable generation."""

    def test_length(self):
        """Test exact length, including odd lengths."""
        rng = SeededRandomSource(23)
        for length in [1, 5, 8, 16, 33]:
            config = build_config(mode="memorable", length=length)
            assert len(generate_memorable(config, memorable_pools(config), rng).value) == length

    def test_alternation_without_injection(self):
        """Test consonant/vowel alternation with digits and symbols off."""
        config = build_config(mode="memorable", length=12, use_digits=False,
                              use_symbols=False, use_uppercase=False)
        rng = SeededRandomSource(29)

        for _ in range(20):
            password = generate_memorable(config, memorable_pools(config), rng).value
            kinds = ["c" if c in CONSONANTS else "v" for c in password]
            assert all(c in CONSONANTS or c in VOWELS for c in password)
            assert all(a != b for a, b in zip(kinds, kinds[1:]))

    def test_capitalized_first_letter(self):
        """Test that the first letter is capitalized when uppercase is on."""
        config = build_config(mode="memorable", length=10, use_digits=False, use_symbols=False)
        password = generate_memorable(config, memorable_pools(config), SeededRandomSource(31)).value

        assert password[0].isupper()
        assert password[1:].islower()

    def test_uppercase_only(self):
        """Test memorable passwords without lowercase letters."""
        config = build_config(mode="memorable", length=10, use_lowercase=False,
                              use_digits=False, use_symbols=False)
        assert generate_memorable(config, memorable_pools(config), SeededRandomSource(37)).value.isupper()

    def test_injection_pools(self):
        """Test that injected characters come from digits and symbols only."""
        config = build_config(mode="memorable", length=64)
        rng = SeededRandomSource(41)
        allowed = set(CONSONANTS + VOWELS + CONSONANTS.upper() + VOWELS.upper() + string.digits + SYMBOLS)

        for _ in range(20):
            assert set(generate_memorable(config, memorable_pools(config), rng).value) <= allowed

    def test_exclusions(self):
        """Test that similar letters are dropped in both cases."""
        config = build_config(mode="memorable", length=40, exclude_similar=True)
        rng = SeededRandomSource(43)

        for _ in range(20):
            password = generate_memorable(config, memorable_pools(config), rng).value
            assert not set(password) & set("iIl1Lo0O")

    def test_exclusions_remove_all_vowels(self):
        """Test failure when every vowel is excluded."""
        config = build_config(mode="memorable", exclude_chars="aeiou")

        with pytest.raises(EmptyCharsetError):
            memorable_pools(config)

    def test_empty_pools_fail_at_construction(self):
        """Test that the generator checks memorable pools before generating."""
        config = build_config(mode="memorable", exclude_chars="bcdfghjklmnpqrstvwxyz")

        with pytest.raises(EmptyCharsetError):
            PasswordGenerator(config)

    def test_requires_letters(self):
        """Test that memorable mode needs a letter class."""
        with pytest.raises(ConfigurationError):
            build_config(mode="memorable", use_lowercase=False, use_uppercase=False)


class TestPinMode:
    """Test PIN generation."""

    def test_default_length(self):
        """Test that PINs default to 4 digits."""
        config = build_config(mode="pin")
        assert config.length == 4

    def test_digits_only(self):
        """Test that PINs contain digits only, whatever the class flags say."""
        config = build_config(mode="pin", length=6, use_digits=False)
        rng = SeededRandomSource(47)

        for _ in range(50):
            candidate = generate_pin(config, rng)
            assert candidate.mode is Mode.PIN
            assert len(candidate.value) == 6
            assert candidate.value.isdigit()


class TestGeneratePassword:
    """Test the convenience function."""

    def test_default_password(self):
        """Test default password generation."""
        password = generate_password()
        assert len(password) == 16

    def test_custom_length(self):
        """Test custom password length."""
        for length in [4, 8, 16, 32, 64, 128]:
            assert len(generate_password(length=length)) == length

    def test_character_types(self):
        """Test different character type combinations."""
        assert generate_password(use_uppercase=False, use_digits=False, use_symbols=False).islower()
        assert generate_password(use_lowercase=False, use_digits=False, use_symbols=False).isupper()
        assert generate_password(use_lowercase=False, use_uppercase=False, use_symbols=False).isdigit()

    def test_invalid_configurations(self):
        """Test that no enabled class is rejected."""
        with pytest.raises(ConfigurationError):
            generate_password(use_lowercase=False, use_uppercase=False,
                              use_digits=False, use_symbols=False)

    def test_password_uniqueness(self):
        """Test that generated passwords are unique."""
        passwords = {generate_password(length=16) for _ in range(100)}
        assert len(passwords) == 100

    def test_charset_info(self):
        """Test charset information display."""
        config = build_config(use_uppercase=False, exclude_ambiguous=True)
        info = PasswordGenerator(config).get_charset_info()

        assert "lowercase" in info
        assert "digits" in info
        assert "symbols" in info
        assert "uppercase" not in info
        assert "excluding ambiguous" in info


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
