"""
Password generation strategies: random, memorable and PIN.
"""

from typing import List, NamedTuple, Optional

from ..config import GenerationConfig, Mode, build_config
from ..exceptions import EmptyCharsetError
from .charset import DIGITS, SYMBOLS, CharsetBuilder, apply_exclusions
from .random_source import RandomSource, default_random_source

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"

# Per consonant/vowel pair, in percent
MEMORABLE_DIGIT_CHANCE = 20
MEMORABLE_SYMBOL_CHANCE = 10


class Candidate(NamedTuple):
    """A generated secret and the mode that produced it."""
    value: str
    mode: Mode


def generate_random(config: GenerationConfig, charset: str, rng: RandomSource) -> Candidate:
    """
    Draw config.length characters uniformly from charset.

    With force_all_classes, one slot per enabled class is reserved and filled
    from that class's alphabet before the rest is drawn from the charset and
    the whole password is shuffled. When the password is shorter than the
    number of classes only a random subset of them can be represented.
    """
    if not config.force_all_classes:
        value = "".join(rng.choice(charset) for _ in range(config.length))
        return Candidate(value, Mode.RANDOM)

    # Classes emptied by exclusions cannot be required
    alphabets = [chars for chars in CharsetBuilder(config).class_alphabets().values() if chars]
    rng.shuffle(alphabets)

    chars: List[str] = [rng.choice(alphabet) for alphabet in alphabets[:config.length]]
    chars.extend(rng.choice(charset) for _ in range(config.length - len(chars)))
    rng.shuffle(chars)

    return Candidate("".join(chars), Mode.RANDOM)


def _letter_pool(letters: str, excluded: frozenset) -> str:
    # A letter is usable only if both of its cases are allowed
    return "".join(c for c in letters if c not in excluded and c.upper() not in excluded)


class MemorablePools(NamedTuple):
    """Filtered alphabets used by memorable mode."""
    consonants: str
    vowels: str
    digits: str
    symbols: str


def memorable_pools(config: GenerationConfig) -> MemorablePools:
    """
    Apply the configured exclusions to the memorable-mode alphabets.

    Digits and symbols are empty when their class is disabled.

    Raises:
        EmptyCharsetError: If exclusions leave no consonant or no vowel
    """
    excluded = CharsetBuilder(config).excluded_chars()
    consonants = _letter_pool(CONSONANTS, excluded)
    vowels = _letter_pool(VOWELS, excluded)
    if not consonants or not vowels:
        raise EmptyCharsetError("Exclusions leave no consonants or vowels for memorable mode")

    return MemorablePools(
        consonants=consonants,
        vowels=vowels,
        digits=apply_exclusions(DIGITS, excluded) if config.use_digits else "",
        symbols=apply_exclusions(SYMBOLS, excluded) if config.use_symbols else "",
    )


def generate_memorable(config: GenerationConfig, pools: MemorablePools,
                       rng: RandomSource) -> Candidate:
    """
    Build a pronounceable password from alternating consonants and vowels.

    After each pair a digit and/or a symbol may be injected. The result is cut
    to config.length and its first letter capitalized when uppercase is on.
    The pools come from memorable_pools, already filtered by the exclusions.
    """
    digits = pools.digits
    symbols = pools.symbols

    if rng.randbelow(2):
        pair = (pools.vowels, pools.consonants)
    else:
        pair = (pools.consonants, pools.vowels)

    chars: List[str] = []
    while len(chars) < config.length:
        chars.append(rng.choice(pair[0]))
        chars.append(rng.choice(pair[1]))

        if digits and rng.chance(MEMORABLE_DIGIT_CHANCE):
            chars.append(rng.choice(digits))
        if symbols and rng.chance(MEMORABLE_SYMBOL_CHANCE):
            chars.append(rng.choice(symbols))

    value = "".join(chars[:config.length])

    if not config.use_lowercase:
        value = value.upper()
    elif config.use_uppercase:
        value = value[:1].upper() + value[1:]

    return Candidate(value, Mode.MEMORABLE)


def generate_pin(config: GenerationConfig, rng: RandomSource) -> Candidate:
    """Draw config.length digits. Class flags and exclusions do not apply."""
    value = "".join(rng.choice(DIGITS) for _ in range(config.length))
    return Candidate(value, Mode.PIN)


class PasswordGenerator:
    """Generate single candidates for the character-level modes."""

    def __init__(self, config: GenerationConfig, rng: Optional[RandomSource] = None):
        """
        Initialize password generator.

        Args:
            config: Validated generation settings
            rng: Randomness provider (CSPRNG by default)

        Raises:
            EmptyCharsetError: If exclusions leave random or memorable mode
                without characters
        """
        self.config = config
        self.rng = rng or default_random_source()

        # Pools are checked here, before any attempt is made
        self.charset = ""
        self.pools: Optional[MemorablePools] = None
        if config.mode is Mode.RANDOM:
            self.charset = CharsetBuilder(config).build()
        elif config.mode is Mode.MEMORABLE:
            self.pools = memorable_pools(config)

    def generate(self) -> Candidate:
        """Generate one candidate for the configured mode."""
        if self.config.mode is Mode.RANDOM:
            return generate_random(self.config, self.charset, self.rng)
        if self.config.mode is Mode.MEMORABLE:
            return generate_memorable(self.config, self.pools, self.rng)
        if self.config.mode is Mode.PIN:
            return generate_pin(self.config, self.rng)

        raise ValueError(f"{self.config.mode.value} mode is not a character-level mode")

    def get_charset_info(self) -> str:
        """Get human-readable description of the character settings."""
        return self.config.describe()


def generate_password(length: int = 16,
                      use_lowercase: bool = True,
                      use_uppercase: bool = True,
                      use_digits: bool = True,
                      use_symbols: bool = True,
                      exclude_ambiguous: bool = False,
                      exclude_similar: bool = False,
                      exclude_chars: str = "",
                      force_all_classes: bool = False,
                      rng: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate one random-mode password.

    No strength gate is applied; use passgen.orchestrator.generate for that.

    Returns:
        Generated password string

    Raises:
        ConfigurationError: If no character class is enabled or all are excluded
    """
    config = build_config(
        length=length,
        use_lowercase=use_lowercase,
        use_uppercase=use_uppercase,
        use_digits=use_digits,
        use_symbols=use_symbols,
        exclude_ambiguous=exclude_ambiguous,
        exclude_similar=exclude_similar,
        exclude_chars=exclude_chars,
        force_all_classes=force_all_classes,
    )

    return PasswordGenerator(config, rng).generate().value
