from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from enigmasim.core.alphabet import Alphabet
from enigmasim.core.machine import Machine
from enigmasim.core.permutation import Permutation
from enigmasim.core.rotor import RotorSpec


@dataclass(frozen=True)
class MachineConfig:
    alphabet: Alphabet
    num_slots: int
    num_pawls: int

    # Catalog order follows the configuration file
    rotors: tuple[RotorSpec, ...] = field(default_factory=tuple)

    def build_machine(self) -> Machine:
        """A new machine; machines built from one config share no state."""
        return Machine(self.alphabet, self.num_slots, self.num_pawls, self.rotors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "alphabet": self.alphabet.chars,
            "num_slots": self.num_slots,
            "num_pawls": self.num_pawls,
            "rotors": [
                {
                    "name": r.name,
                    "kind": r.kind.value,
                    "notches": r.notch_chars(),
                    "cycles": r.permutation.cycles,
                }
                for r in self.rotors
            ],
        }


@dataclass(frozen=True)
class MessageSetting:
    rotors: tuple[str, ...]
    setting: str

    # Cycle notation; empty means no plugs
    plugboard: str = ""

    def apply(self, machine: Machine) -> None:
        machine.insert_rotors(self.rotors)
        machine.set_rotors(self.setting)
        machine.set_plugboard(Permutation(self.plugboard, machine.alphabet))

    def to_dict(self) -> dict[str, Any]:
        return {
            "rotors": list(self.rotors),
            "setting": self.setting,
            "plugboard": self.plugboard,
        }
