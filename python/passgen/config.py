"""
Generation settings for passgen.

All options are collected into a single immutable GenerationConfig that is
built once from CLI input, validated, and passed explicitly to every component.
"""

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Optional


class Mode(str, Enum):
    """Generation strategy."""

    RANDOM = "random"
    MEMORABLE = "memorable"
    PIN = "pin"
    PASSPHRASE = "passphrase"

    @property
    def is_scored(self) -> bool:
        """Whether candidates of this mode go through the strength gate."""
        return self in (Mode.RANDOM, Mode.MEMORABLE)


class StrengthLevel(IntEnum):
    """Strength buckets, ordered weakest first."""

    WEAK = 0
    MEDIUM = 1
    STRONG = 2
    VERY_STRONG = 3

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_label(cls, label: str) -> "StrengthLevel":
        """Parse a label such as 'very-strong'."""
        try:
            return cls[label.strip().upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f"Unknown strength level: {label}") from None

    @classmethod
    def labels(cls):
        return [level.label for level in cls]


DEFAULT_LENGTH = 16
DEFAULT_PIN_LENGTH = 4
DEFAULT_COUNT = 1
DEFAULT_WORD_COUNT = 4
DEFAULT_SEPARATOR = "-"
DEFAULT_WORDLIST = "/usr/share/dict/words"
DEFAULT_MIN_STRENGTH = StrengthLevel.STRONG


@dataclass(frozen=True)
class GenerationConfig:
    """Validated, read-only generation settings."""

    mode: Mode = Mode.RANDOM
    length: int = DEFAULT_LENGTH
    count: int = DEFAULT_COUNT

    # Character classes
    use_uppercase: bool = True
    use_lowercase: bool = True
    use_digits: bool = True
    use_symbols: bool = True

    # Exclusions
    exclude_ambiguous: bool = False
    exclude_similar: bool = False
    exclude_chars: str = ""
    force_all_classes: bool = False

    # Passphrase mode
    word_count: int = DEFAULT_WORD_COUNT
    separator: str = DEFAULT_SEPARATOR
    wordlist: Optional[str] = None  # None tries DEFAULT_WORDLIST

    min_strength: StrengthLevel = DEFAULT_MIN_STRENGTH

    # Output destinations
    show_strength: bool = True
    display: bool = True
    output_path: Optional[str] = None
    clipboard: bool = False

    def enabled_classes(self):
        """Names of enabled character classes, in charset order."""
        flags = (
            ("uppercase", self.use_uppercase),
            ("lowercase", self.use_lowercase),
            ("digits", self.use_digits),
            ("symbols", self.use_symbols),
        )
        return [name for name, enabled in flags if enabled]

    def describe(self) -> str:
        """Human-readable summary of the character settings."""
        if self.mode is Mode.PIN:
            return "digits"

        info = ", ".join(self.enabled_classes()) or "no character classes"

        excluded = []
        if self.exclude_ambiguous:
            excluded.append("ambiguous")
        if self.exclude_similar:
            excluded.append("similar")
        if self.exclude_chars:
            excluded.append(f"'{self.exclude_chars}'")
        if excluded:
            info += f" (excluding {', '.join(excluded)} chars)"

        return info


def build_config(length: Optional[int] = None,
                 mode="random",
                 min_strength="strong",
                 **options) -> GenerationConfig:
    """
    Build and validate a GenerationConfig.

    Args:
        length: Password length, or None for the mode default (16, or 4 for pin)
        mode: Mode or its name
        min_strength: StrengthLevel, its label or its numeric value
        **options: Any other GenerationConfig field

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If an option value or combination is invalid
    """
    from .exceptions import ConfigurationError
    from .utils.validation import validate_config

    try:
        mode = Mode(mode)
    except ValueError:
        raise ConfigurationError(f"Unknown mode: {mode}") from None

    if isinstance(min_strength, int) and not isinstance(min_strength, bool):
        try:
            min_strength = StrengthLevel(min_strength)
        except ValueError:
            raise ConfigurationError(f"Unknown strength level: {min_strength}") from None
    elif isinstance(min_strength, str):
        try:
            min_strength = StrengthLevel.from_label(min_strength)
        except ValueError as e:
            raise ConfigurationError(str(e)) from None
    else:
        raise ConfigurationError(f"Unknown strength level: {min_strength!r}")

    if length is None:
        length = DEFAULT_PIN_LENGTH if mode is Mode.PIN else DEFAULT_LENGTH

    config = GenerationConfig(mode=mode, length=length, min_strength=min_strength, **options)

    # A PIN is digits only, whatever the class flags say
    if mode is Mode.PIN:
        config = replace(config, use_uppercase=False, use_lowercase=False,
                         use_digits=True, use_symbols=False)

    validate_config(config)
    return config
