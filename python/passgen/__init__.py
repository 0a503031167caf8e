"""
passgen - password and passphrase generator with strength evaluation.
"""

from .config import GenerationConfig, Mode, StrengthLevel, build_config
from .orchestrator import GenerationResult, RetryOrchestrator, generate
from .strength import StrengthScore, evaluate_strength

__version__ = "1.0.0"

__all__ = [
    "GenerationConfig",
    "GenerationResult",
    "Mode",
    "RetryOrchestrator",
    "StrengthLevel",
    "StrengthScore",
    "build_config",
    "evaluate_strength",
    "generate",
]
