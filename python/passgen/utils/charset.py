"""
Character set construction for passgen.
"""

import logging
import string
from typing import Dict, Iterable

from ..config import GenerationConfig
from ..exceptions import EmptyCharsetError

logger = logging.getLogger(__name__)

# Character classes
UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;"

# Visually confusable punctuation and alphanumerics
AMBIGUOUS_CHARS = frozenset("{}[]()/<>,;:.|\\")
SIMILAR_CHARS = frozenset("iIl1Lo0O")

CLASS_ALPHABETS = {
    "uppercase": UPPERCASE,
    "lowercase": LOWERCASE,
    "digits": DIGITS,
    "symbols": SYMBOLS,
}


def apply_exclusions(chars: str, *exclusions: Iterable[str]) -> str:
    """
    Remove every excluded character from chars.

    All exclusion sets are merged before filtering, so the result does not
    depend on the order they are given in. Duplicates are dropped and the first
    occurrence order is kept.
    """
    excluded = set()
    for exclusion in exclusions:
        excluded.update(exclusion)

    return "".join(c for c in dict.fromkeys(chars) if c not in excluded)


class CharsetBuilder:
    """Build the allowed alphabet for a configuration."""

    def __init__(self, config: GenerationConfig):
        self.config = config

    def excluded_chars(self) -> frozenset:
        """Union of all configured exclusion sets."""
        excluded = set(self.config.exclude_chars)
        if self.config.exclude_ambiguous:
            excluded |= AMBIGUOUS_CHARS
        if self.config.exclude_similar:
            excluded |= SIMILAR_CHARS
        return frozenset(excluded)

    def class_alphabets(self) -> Dict[str, str]:
        """
        Get the filtered alphabet of every enabled class.

        Returns:
            Mapping of class name to its remaining characters, in charset order.
            Classes whose characters were all excluded map to an empty string.
        """
        excluded = self.excluded_chars()
        return {
            name: apply_exclusions(CLASS_ALPHABETS[name], excluded)
            for name in self.config.enabled_classes()
        }

    def build(self) -> str:
        """
        Build the charset.

        Returns:
            De-duplicated characters in stable order (uppercase, lowercase,
            digits, symbols)

        Raises:
            EmptyCharsetError: If no character is left after exclusions
        """
        charset = "".join(self.class_alphabets().values())

        if not charset:
            raise EmptyCharsetError(
                "No characters left for password generation after exclusions "
                f"({self.config.describe()})"
            )

        logger.debug(f"Charset built with {len(charset)} characters: {self.config.describe()}")
        return charset


def build_charset(config: GenerationConfig) -> str:
    return CharsetBuilder(config).build()
