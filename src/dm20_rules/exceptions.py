"""Exceptions raised by the rules engine.

Rules problems are never raised: validators report them as data. These
exceptions cover misuse of the engine itself.
"""


class RulesEngineError(Exception):
    """Base class for rules engine failures."""


class RulesConfigError(RulesEngineError):
    """Raised when the engine configuration is invalid."""
