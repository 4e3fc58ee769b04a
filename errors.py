# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every error raised by the machine and its readers."""


# ── alphabet domain ──────────────────────────────────────────────
class AlphabetError(EnigmaError):
    """Symbol or index outside the alphabet's domain."""


class RangeError(AlphabetError):
    pass


class UnknownSymbolError(AlphabetError):
    pass


# ── notation & configuration ─────────────────────────────────────
class CycleSyntaxError(EnigmaError):
    """Malformed cycle notation."""


class UnknownRotorError(EnigmaError):
    pass


class DuplicateRotorError(EnigmaError):
    pass


class ConfigurationError(EnigmaError):
    pass


class LengthError(EnigmaError):
    pass


class UsageError(EnigmaError):
    """Operation not supported by this component (e.g. reflector backward)."""


__all__ = [
    "EnigmaError",
    "AlphabetError",
    "RangeError",
    "UnknownSymbolError",
    "CycleSyntaxError",
    "UnknownRotorError",
    "DuplicateRotorError",
    "ConfigurationError",
    "LengthError",
    "UsageError",
]
