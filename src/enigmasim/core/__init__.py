from .errors import (
    ConfigurationError,
    ConversionError,
    EnigmaError,
    NotInAlphabet,
    OutOfRange,
    PermutationError,
    SettingError,
)
from .alphabet import Alphabet
from .permutation import Permutation
from .rotor import Rotor, RotorKind, RotorSpec
from .machine import Machine

__all__ = [
    "Alphabet",
    "Permutation",
    "Rotor",
    "RotorKind",
    "RotorSpec",
    "Machine",
    "EnigmaError",
    "ConfigurationError",
    "SettingError",
    "PermutationError",
    "NotInAlphabet",
    "OutOfRange",
    "ConversionError",
]
