from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

from .alphabet import Alphabet
from .errors import ConfigurationError, OutOfRange, PermutationError, SettingError
from .permutation import Permutation


class RotorKind(enum.Enum):
    MOVING = "moving"
    FIXED = "fixed"
    REFLECTOR = "reflector"


@dataclass(frozen=True)
class RotorSpec:
    """
    Immutable wiring definition of a rotor, as listed in a machine's catalog.

    The current position of a rotor lives in a Rotor built from the spec,
    so one spec can sit in any number of machines at once.
    """

    name: str
    kind: RotorKind
    permutation: Permutation
    notches: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("A rotor needs a non-empty name.")
        if self.notches and self.kind is not RotorKind.MOVING:
            raise ConfigurationError(f"Rotor {self.name} does not move, so it cannot have notches.")
        if self.kind is RotorKind.REFLECTOR and not self.permutation.derangement():
            raise PermutationError(f"The permutation of reflector {self.name} must be a derangement.")

    @classmethod
    def moving(cls, name: str, perm: Permutation, notches: str = "") -> "RotorSpec":
        alphabet = perm.alphabet()
        for ch in notches:
            if not alphabet.contains(ch):
                raise ConfigurationError(f"Notch {ch!r} of rotor {name} is not in the alphabet.")
        return cls(name, RotorKind.MOVING, perm, frozenset(alphabet.to_int(ch) for ch in notches))

    @classmethod
    def fixed(cls, name: str, perm: Permutation) -> "RotorSpec":
        return cls(name, RotorKind.FIXED, perm)

    @classmethod
    def reflector(cls, name: str, perm: Permutation) -> "RotorSpec":
        return cls(name, RotorKind.REFLECTOR, perm)

    def notch_chars(self) -> str:
        alphabet = self.permutation.alphabet()
        return "".join(alphabet.to_char(i) for i in sorted(self.notches))


def _check_range(rotor: "Rotor", posn: int) -> int:
    if not 0 <= posn < rotor.size():
        raise OutOfRange(f"Setting {posn} is out of range for rotor {rotor.name} of size {rotor.size()}.")
    return posn


def _check_reflector(rotor: "Rotor", posn: int) -> int:
    if posn != 0:
        raise SettingError(f"Reflector {rotor.name} has only one position.")
    return posn


def _step(rotor: "Rotor") -> int:
    return rotor.permutation.wrap(rotor.setting + 1)


def _stay(rotor: "Rotor") -> int:
    return rotor.setting


def _notch_reached(rotor: "Rotor") -> bool:
    # A moving rotor without notches counts as always at its notch.
    if not rotor.spec.notches:
        return True
    return rotor.setting in rotor.spec.notches


def _always(rotor: "Rotor") -> bool:
    return True


_SET: dict[RotorKind, Callable[["Rotor", int], int]] = {
    RotorKind.MOVING: _check_range,
    RotorKind.FIXED: _check_range,
    RotorKind.REFLECTOR: _check_reflector,
}

_ADVANCE: dict[RotorKind, Callable[["Rotor"], int]] = {
    RotorKind.MOVING: _step,
    RotorKind.FIXED: _stay,
    RotorKind.REFLECTOR: _stay,
}

# Non-moving rotors report True so they never block the stepping loop.
_AT_NOTCH: dict[RotorKind, Callable[["Rotor"], bool]] = {
    RotorKind.MOVING: _notch_reached,
    RotorKind.FIXED: _always,
    RotorKind.REFLECTOR: _always,
}


class Rotor:
    """A rotor from RotorSpec sitting at some setting (initially 0)."""

    def __init__(self, spec: RotorSpec) -> None:
        self.spec = spec
        self._setting = 0

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def kind(self) -> RotorKind:
        return self.spec.kind

    @property
    def permutation(self) -> Permutation:
        return self.spec.permutation

    @property
    def setting(self) -> int:
        return self._setting

    def alphabet(self) -> Alphabet:
        return self.spec.permutation.alphabet()

    def size(self) -> int:
        return self.spec.permutation.size()

    def rotates(self) -> bool:
        return self.spec.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        return self.spec.kind is RotorKind.REFLECTOR

    def set(self, posn: int) -> None:
        self._setting = _SET[self.spec.kind](self, posn)

    def set_char(self, ch: str) -> None:
        self.set(self.alphabet().to_int(ch))

    def convert_forward(self, p: int) -> int:
        perm = self.spec.permutation
        return perm.wrap(perm.permute(p + self._setting) - self._setting)

    def convert_backward(self, e: int) -> int:
        perm = self.spec.permutation
        return perm.wrap(perm.invert(e + self._setting) - self._setting)

    def at_notch(self) -> bool:
        return _AT_NOTCH[self.spec.kind](self)

    def advance(self) -> None:
        self._setting = _ADVANCE[self.spec.kind](self)

    def __repr__(self) -> str:
        return f"Rotor({self.name!r}, {self.kind.value}, setting={self._setting})"
