from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from .alphabet import Alphabet
from .errors import ConfigurationError, ConversionError, SettingError
from .permutation import Permutation
from .rotor import Rotor, RotorSpec

log = logging.getLogger(__name__)


class Machine:
    """
    A rotor machine with num_slots rotor slots and num_pawls pawls.

    Slot 0 holds the reflector, the rightmost num_pawls slots hold moving
    rotors and everything in between is fixed. Every call to convert()
    steps the rotors first, so the machine is a stateful stream transform.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_slots: int,
        num_pawls: int,
        catalog: Iterable[RotorSpec],
    ) -> None:
        if num_slots <= 1:
            raise ConfigurationError(f"A machine needs more than one rotor slot, got {num_slots}.")
        if not 0 <= num_pawls < num_slots:
            raise ConfigurationError(
                f"Pawl count must be >= 0 and < the number of slots ({num_slots}), got {num_pawls}."
            )

        specs: dict[str, RotorSpec] = {}
        for spec in catalog:
            if spec.name in specs:
                raise ConfigurationError(f"Rotor {spec.name} is defined twice.")
            if spec.permutation.alphabet() != alphabet:
                raise ConfigurationError(f"Rotor {spec.name} is wired for a different alphabet.")
            specs[spec.name] = spec
        if not specs:
            raise ConfigurationError("A machine needs at least one available rotor.")

        self._alphabet = alphabet
        self._num_slots = num_slots
        self._num_pawls = num_pawls
        self._catalog = specs
        self._rotors: list[Rotor] = []
        self._plugboard: Optional[Permutation] = None

    # ── configuration ────────────────────────────────────────────
    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def num_slots(self) -> int:
        return self._num_slots

    def num_pawls(self) -> int:
        return self._num_pawls

    def catalog(self) -> list[RotorSpec]:
        return list(self._catalog.values())

    def has_rotor(self, name: str) -> bool:
        return name in self._catalog

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        return tuple(self._rotors)

    @property
    def plugboard(self) -> Optional[Permutation]:
        return self._plugboard

    def insert_rotors(self, names: Sequence[str]) -> None:
        """
        Fill the slots with fresh rotors named by names (names[0] is the
        reflector). Every inserted rotor starts at setting 0.
        """
        if len(names) != self._num_slots:
            raise ConfigurationError(
                f"Expected {self._num_slots} rotors, got {len(names)}: {' '.join(names)}"
            )

        used: set[str] = set()
        for name in names:
            if name not in self._catalog:
                raise ConfigurationError(f"Rotor {name} is not one of the available rotors.")
            if name in used:
                raise ConfigurationError(f"Rotor {name} cannot be inserted twice.")
            used.add(name)

        rotors = [Rotor(self._catalog[name]) for name in names]
        if not rotors[0].reflecting():
            raise ConfigurationError(f"The first rotor must be a reflector; {names[0]} is not.")

        first_moving = self._num_slots - self._num_pawls
        for i, rotor in enumerate(rotors[1:], start=1):
            if (i >= first_moving) != rotor.rotates():
                raise ConfigurationError(
                    f"Wrong number of moving rotors for {self._num_pawls} pawls: "
                    f"rotor {rotor.name} in slot {i} {'rotates' if rotor.rotates() else 'does not rotate'}."
                )

        self._rotors = rotors
        log.debug("inserted rotors %s", " ".join(names))

    def set_rotors(self, setting: str) -> None:
        """Set slots 1.. from setting, one character per rotor, left to right."""
        if len(setting) != self._num_slots - 1:
            raise SettingError(
                f"Setting {setting!r} should be {self._num_slots - 1} characters long."
            )
        for ch in setting:
            if not self._alphabet.contains(ch):
                raise SettingError(f"Setting {setting!r} has {ch!r}, which is not in the alphabet.")
        if not self._rotors:
            raise ConversionError("Rotors must be inserted before they can be set.")

        posns = [self._alphabet.to_int(ch) for ch in setting]
        # Check every slot before touching any, so a bad setting changes nothing.
        for rotor, posn in zip(self._rotors[1:], posns):
            if rotor.reflecting() and posn != 0:
                raise SettingError(f"Reflector {rotor.name} has only one position.")

        for rotor, posn in zip(self._rotors[1:], posns):
            rotor.set(posn)

    def set_plugboard(self, plugboard: Permutation) -> None:
        self._plugboard = plugboard

    def rotor_settings(self) -> str:
        """Current setting of every slot (reflector included) as characters."""
        return "".join(self._alphabet.to_char(r.setting) for r in self._rotors)

    # ── stepping & conversion ────────────────────────────────────
    def advance(self) -> None:
        """
        Step the rotors for one keypress.

        Within the pawl window, whenever the rotor to the right of a pair
        sits at its notch, both rotors of the pair step. The last rotor
        always steps. No rotor steps more than once per keypress, which is
        what produces the double step of a middle rotor.
        """
        if not self._rotors:
            raise ConversionError("Rotors have not been inserted yet.")

        n = len(self._rotors)
        stepped = [False] * n

        for i in range(n - self._num_pawls, n - 1):
            current = self._rotors[i]
            right = self._rotors[i + 1]
            if right.at_notch():
                if not stepped[i]:
                    current.advance()
                    stepped[i] = True
                if not stepped[i + 1]:
                    right.advance()
                    stepped[i + 1] = True

        if not stepped[n - 1]:
            self._rotors[n - 1].advance()

        if log.isEnabledFor(logging.DEBUG):
            log.debug("settings %s", self.rotor_settings())

    def convert(self, c: int) -> int:
        """Advance the rotors, then encipher the character with index c."""
        if not 0 <= c < self._alphabet.size():
            raise ConversionError(
                f"Input index {c} is outside 0..{self._alphabet.size() - 1}."
            )
        if not self._rotors:
            raise ConversionError("Rotors have not been inserted yet.")
        if self._plugboard is None:
            raise ConversionError("No plugboard has been set.")

        self.advance()

        c = self._plugboard.permute(c)
        for rotor in reversed(self._rotors):
            c = rotor.convert_forward(c)
        for rotor in self._rotors[1:]:
            c = rotor.convert_backward(c)
        return self._plugboard.invert(c)

    def convert_message(self, msg: str) -> str:
        """Encipher msg character by character, stepping before each one."""
        to_int = self._alphabet.to_int
        to_char = self._alphabet.to_char
        return "".join(to_char(self.convert(to_int(ch))) for ch in msg)
