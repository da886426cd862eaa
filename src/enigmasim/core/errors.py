from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every error raised by the simulator."""


class ConfigurationError(EnigmaError):
    """Bad alphabet, slot/pawl counts, rotor catalog or rotor selection."""


class SettingError(EnigmaError):
    """Bad setting text, or an attempt to turn a reflector."""


class PermutationError(EnigmaError):
    """Malformed cycles, foreign or repeated symbols, non-derangement reflector."""


class NotInAlphabet(EnigmaError):
    pass


class OutOfRange(EnigmaError, IndexError):
    pass


class ConversionError(EnigmaError, RuntimeError):
    """Conversion attempted on a machine that is not ready for it."""
