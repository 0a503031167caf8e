"""
Generate-evaluate-retry loop for passgen.
"""

import logging
from enum import Enum
from typing import List, NamedTuple, Optional

from .config import GenerationConfig, Mode
from .strength import StrengthScore, evaluate_strength
from .utils.passphrase import generate_passphrase, resolve_wordlist
from .utils.password_generator import Candidate, PasswordGenerator
from .utils.random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 25


class LoopState(Enum):
    GENERATING = "generating"
    EVALUATING = "evaluating"
    ACCEPTED = "accepted"
    EXHAUSTED = "exhausted"


class GeneratedPassword(NamedTuple):
    """An accepted candidate."""
    candidate: Candidate
    strength: Optional[StrengthScore]  # None when the mode is not scored
    attempts: int
    met_requirement: bool

    @property
    def value(self) -> str:
        return self.candidate.value


class GenerationResult(NamedTuple):
    """All accepted passwords of one run."""
    passwords: List[GeneratedPassword]
    config: GenerationConfig

    @property
    def values(self) -> List[str]:
        return [entry.value for entry in self.passwords]

    @property
    def exhausted(self) -> bool:
        """Whether any password was accepted without meeting the minimum strength."""
        return any(not entry.met_requirement for entry in self.passwords)


class RetryOrchestrator:
    """Drive generation until the minimum strength is met or attempts run out."""

    def __init__(self, config: GenerationConfig, rng: Optional[RandomSource] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        """
        Initialize the orchestrator.

        The charset (random mode), memorable pools and word list (passphrase
        mode) are prepared here so configuration problems surface before the
        first attempt.

        Args:
            config: Validated generation settings
            rng: Randomness provider (CSPRNG by default)
            max_attempts: Upper bound on attempts per password

        Raises:
            EmptyCharsetError: If exclusions leave no characters
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.config = config
        self.rng = rng or default_random_source()
        self.max_attempts = max_attempts

        self.words: List[str] = []
        self.generator: Optional[PasswordGenerator] = None

        if config.mode is Mode.PASSPHRASE:
            self.words = resolve_wordlist(config.wordlist)
        else:
            self.generator = PasswordGenerator(config, self.rng)

    def _generate(self) -> Candidate:
        if self.generator is None:
            return generate_passphrase(self.config, self.words, self.rng)
        return self.generator.generate()

    def run_once(self) -> GeneratedPassword:
        """
        Produce one accepted password.

        PIN and passphrase candidates are accepted as generated. Random and
        memorable candidates are scored and regenerated until their level
        reaches config.min_strength; after max_attempts the last candidate is
        accepted with a warning.
        """
        if not self.config.mode.is_scored:
            return GeneratedPassword(self._generate(), None, 1, True)

        attempts = 0
        state = LoopState.GENERATING

        while True:
            if state is LoopState.GENERATING:
                candidate = self._generate()
                attempts += 1
                state = LoopState.EVALUATING

            elif state is LoopState.EVALUATING:
                strength = evaluate_strength(candidate.value)
                if strength.meets(self.config.min_strength):
                    state = LoopState.ACCEPTED
                elif attempts >= self.max_attempts:
                    state = LoopState.EXHAUSTED
                else:
                    logger.debug(f"Attempt {attempts} scored {strength.label}, regenerating")
                    state = LoopState.GENERATING

            elif state is LoopState.ACCEPTED:
                logger.debug(f"Accepted {strength.label} password after {attempts} attempt(s)")
                return GeneratedPassword(candidate, strength, attempts, True)

            else:
                logger.warning(
                    f"Could not reach {self.config.min_strength.label} strength in "
                    f"{attempts} attempts; using a {strength.label} password"
                )
                return GeneratedPassword(candidate, strength, attempts, False)

    def run(self) -> GenerationResult:
        """Produce config.count independent passwords."""
        logger.info(
            f"Generating {self.config.count} {self.config.mode.value} password(s) "
            f"using: {self.config.describe()}"
        )
        passwords = [self.run_once() for _ in range(self.config.count)]
        return GenerationResult(passwords, self.config)


def generate(config: GenerationConfig, rng: Optional[RandomSource] = None) -> GenerationResult:
    """
    Convenience function to run a full generation.

    Args:
        config: Validated generation settings
        rng: Randomness provider (CSPRNG by default)

    Returns:
        GenerationResult with config.count accepted passwords
    """
    return RetryOrchestrator(config, rng).run()
