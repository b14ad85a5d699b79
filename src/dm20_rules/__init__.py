"""
dm20-rules - D&D 5e SRD character rules validation engine.
"""

from .config import DEFAULT_CONFIG, RulesConfig, configure_logging, load_config
from .engine import (
    FeatOptions,
    SpellOptions,
    ValidationStep,
    get_applicable_steps,
    get_feat_options,
    get_spell_options,
    validate_ability_score_change,
    validate_character,
    validate_field,
    validate_multiclass_addition,
)
from .exceptions import RulesConfigError, RulesEngineError
from .feedback import *
from .models import *
from .results import ValidationIssue, ValidationResult, ValidationSeverity
from .validators import *

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("dm20-rules")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "RulesConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "configure_logging",
    "RulesEngineError",
    "RulesConfigError",
    "ValidationSeverity",
    "ValidationIssue",
    "ValidationResult",
    "ValidationStep",
    "SpellOptions",
    "FeatOptions",
    "get_applicable_steps",
    "validate_character",
    "validate_ability_score_change",
    "validate_multiclass_addition",
    "validate_field",
    "get_spell_options",
    "get_feat_options",
]
