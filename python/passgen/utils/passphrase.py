"""
Passphrase generation from a word list.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

from ..config import DEFAULT_WORDLIST, GenerationConfig, Mode
from ..exceptions import WordListError
from .charset import DIGITS, SYMBOLS, CharsetBuilder, apply_exclusions
from .password_generator import Candidate
from .random_source import RandomSource

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"^[A-Za-z]{3,}$")

# Per word, in percent
CAPITALIZE_CHANCE = 50
DIGIT_CHANCE = 30
SYMBOL_CHANCE = 20

BUILTIN_WORDS = (
    "apple", "banana", "cherry", "dragon", "eagle", "forest", "garden", "harbor",
    "island", "jungle", "kettle", "lemon", "marble", "nectar", "orange", "pepper",
    "quartz", "river", "silver", "tiger", "umbrella", "violet", "walnut", "yellow",
    "zebra", "anchor", "bridge", "candle", "desert", "falcon", "glacier", "hammer",
    "lantern", "meadow", "orbit", "pirate", "rocket", "saddle", "thunder", "window",
)


def load_wordlist(path: str) -> List[str]:
    """
    Load usable words from a word-list file.

    Only ASCII alphabetic entries of at least three letters are kept. Words are
    lower-cased and de-duplicated, keeping file order.

    Raises:
        WordListError: If the file is missing, unreadable or has no usable word
    """
    wordlist = Path(path)
    try:
        text = wordlist.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise WordListError(f"Cannot read word list {wordlist}: {e}") from e

    words = dict.fromkeys(
        line.strip().lower() for line in text.splitlines() if WORD_PATTERN.match(line.strip())
    )
    if not words:
        raise WordListError(f"Word list {wordlist} contains no usable words")

    logger.debug(f"Loaded {len(words)} words from {wordlist}")
    return list(words)


def resolve_wordlist(path: Optional[str]) -> List[str]:
    """
    Load the word list at path, falling back to the built-in words.

    An explicit path that cannot be used is reported as a warning. Without a
    path the system dictionary is tried, and its absence is not reported.
    """
    try:
        return load_wordlist(path or DEFAULT_WORDLIST)
    except WordListError as e:
        if path:
            logger.warning(f"{e}; using built-in word list")
        else:
            logger.debug(f"{e}; using built-in word list")

    return list(BUILTIN_WORDS)


def _mutate_word(word: str, config: GenerationConfig, digits: str, symbols: str,
                 rng: RandomSource) -> str:
    if config.use_uppercase and rng.chance(CAPITALIZE_CHANCE):
        word = word[:1].upper() + word[1:]

    if digits and rng.chance(DIGIT_CHANCE):
        word += rng.choice(digits)

    if symbols and rng.chance(SYMBOL_CHANCE):
        position = rng.randbelow(len(word))
        word = word[:position] + rng.choice(symbols) + word[position + 1:]

    return word


def generate_passphrase(config: GenerationConfig, words: List[str], rng: RandomSource) -> Candidate:
    """
    Sample config.word_count words and join them with config.separator.

    Each word is independently capitalized, given a trailing digit, or has one
    letter replaced by a symbol, depending on the enabled classes. Digits and
    symbols that appear in the separator are never injected, so the separator
    count stays word_count - 1.
    """
    if not words:
        raise WordListError("No words available for passphrase generation")

    excluded = CharsetBuilder(config).excluded_chars()
    digits = apply_exclusions(DIGITS, excluded, config.separator) if config.use_digits else ""
    symbols = apply_exclusions(SYMBOLS, excluded, config.separator) if config.use_symbols else ""

    chosen = [
        _mutate_word(rng.choice(words), config, digits, symbols, rng)
        for _ in range(config.word_count)
    ]

    return Candidate(config.separator.join(chosen), Mode.PASSPHRASE)
