"""
Heuristic password strength scoring.

The score is a weighted sum of length, character class coverage and class
variety, minus a penalty for sequential or repeated runs. It is a quick proxy
for guessability, not an information-theoretic entropy measure, and a high
score is no cryptographic guarantee.
"""

import string
from typing import NamedTuple, Tuple

from .config import StrengthLevel

MAX_PATTERN_PENALTIES = 5
PATTERN_PENALTY = 2

# (minimum length, points), checked in order
LENGTH_POINTS = ((20, 30), (16, 25), (12, 20), (8, 10))
SHORT_LENGTH_POINTS = 5

# (minimum score, level), checked in order
LEVEL_THRESHOLDS = (
    (85, StrengthLevel.VERY_STRONG),
    (70, StrengthLevel.STRONG),
    (50, StrengthLevel.MEDIUM),
)


class StrengthScore(NamedTuple):
    """Result of a strength evaluation."""
    score: int
    level: StrengthLevel

    @property
    def label(self) -> str:
        return self.level.label

    def meets(self, minimum: StrengthLevel) -> bool:
        return self.level >= minimum


def _length_points(length: int) -> int:
    for minimum, points in LENGTH_POINTS:
        if length >= minimum:
            return points
    return SHORT_LENGTH_POINTS


def _class_counts(password: str) -> Tuple[int, int, int, int]:
    upper = sum(1 for c in password if c in string.ascii_uppercase)
    lower = sum(1 for c in password if c in string.ascii_lowercase)
    digits = sum(1 for c in password if c in string.digits)
    other = len(password) - upper - lower - digits
    return upper, lower, digits, other


def count_pattern_penalties(password: str) -> Tuple[int, int]:
    """
    Count sequential and repeated windows of three characters.

    A window is sequential when its case-folded character codes are strictly
    increasing ("abc", "aCe", "19z"), and repeated when all three characters
    are identical ("aaa").

    Returns:
        (sequential count, repeated count)
    """
    folded = password.lower()
    sequential = 0
    repeated = 0

    for i in range(len(password) - 2):
        a, b, c = (ord(ch) for ch in folded[i:i + 3])
        if a < b < c:
            sequential += 1
        if password[i] == password[i + 1] == password[i + 2]:
            repeated += 1

    return sequential, repeated


def score_to_level(score: int) -> StrengthLevel:
    for minimum, level in LEVEL_THRESHOLDS:
        if score >= minimum:
            return level
    return StrengthLevel.WEAK


def evaluate_strength(password: str) -> StrengthScore:
    """
    Score a password from 0 to 100 and bucket it into a strength level.

    Scoring:
    - Length: 30 points at 20+ characters, 25 at 16+, 20 at 12+, 10 at 8+, else 5
    - Presence: 7 each for uppercase, lowercase and digits, 9 for any other character
    - Variety: 7 each for 3+ uppercase, 3+ lowercase and 3+ digits, 9 for 2+ others
    - Patterns: minus 2 per sequential or repeated window, at most 5 windows

    Levels: 85+ very-strong, 70+ strong, 50+ medium, else weak.

    Args:
        password: The candidate to score

    Returns:
        StrengthScore with the numeric score and its level
    """
    upper, lower, digits, other = _class_counts(password)

    score = _length_points(len(password))

    score += 7 if upper else 0
    score += 7 if lower else 0
    score += 7 if digits else 0
    score += 9 if other else 0

    score += 7 if upper >= 3 else 0
    score += 7 if lower >= 3 else 0
    score += 7 if digits >= 3 else 0
    score += 9 if other >= 2 else 0

    penalties = min(sum(count_pattern_penalties(password)), MAX_PATTERN_PENALTIES)
    score -= PATTERN_PENALTY * penalties

    score = max(0, min(score, 100))
    return StrengthScore(score, score_to_level(score))
