from __future__ import annotations

import re
from importlib import resources
from pathlib import Path

from enigmasim.core.alphabet import Alphabet
from enigmasim.core.errors import ConfigurationError
from enigmasim.core.permutation import Permutation
from enigmasim.core.rotor import RotorSpec

from .records import MachineConfig

_CYCLE_TOKEN_RE = re.compile(r"(?:\([^\s*()]+\))+")


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise ConfigurationError(f"Expected an integer {what}, got {token!r}.") from e


def _make_rotor(name: str, kind: str, cycles: str, alphabet: Alphabet) -> RotorSpec:
    """
    Build one catalog entry. kind is "R" (reflector), "N" (fixed),
    or "M" followed by the notch characters (e.g. "MQ", "MZM", or just "M").
    """
    perm = Permutation(cycles, alphabet)
    if kind == "R":
        return RotorSpec.reflector(name, perm)
    if kind == "N":
        return RotorSpec.fixed(name, perm)
    if kind.startswith("M"):
        return RotorSpec.moving(name, perm, kind[1:])
    raise ConfigurationError(f"Rotor {name} has an unknown type {kind!r}; use R, N or M<notches>.")


def read_config(text: str) -> MachineConfig:
    """
    Parse a machine description:

        ABCDEFGHIJKLMNOPQRSTUVWXYZ
        5 3
        I MQ (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
        B R (AE) (BN) (CK) ...

    i.e. the alphabet, the slot and pawl counts, then any number of rotors
    as NAME TYPE CYCLES... Tokens are whitespace separated, so line breaks
    carry no meaning.
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise ConfigurationError("Configuration truncated: need an alphabet, slot count and pawl count.")

    alphabet = Alphabet(tokens[0])
    num_slots = _parse_int(tokens[1], "number of rotor slots")
    num_pawls = _parse_int(tokens[2], "number of pawls")

    rotors: list[RotorSpec] = []
    names: set[str] = set()
    pos = 3
    while pos < len(tokens):
        if pos + 1 >= len(tokens):
            raise ConfigurationError(f"Bad rotor description: {tokens[pos]!r} has no type.")
        name, kind = tokens[pos], tokens[pos + 1]
        pos += 2

        cycles: list[str] = []
        while pos < len(tokens) and _CYCLE_TOKEN_RE.fullmatch(tokens[pos]):
            cycles.append(tokens[pos])
            pos += 1

        if name in names:
            raise ConfigurationError(f"Rotor {name} is defined twice.")
        names.add(name)
        rotors.append(_make_rotor(name, kind, " ".join(cycles), alphabet))

    return MachineConfig(alphabet=alphabet, num_slots=num_slots, num_pawls=num_pawls, rotors=tuple(rotors))


def load_config(path: str | Path) -> MachineConfig:
    return read_config(Path(path).read_text(encoding="utf-8"))


def load_default_config(filename: str = "default.conf") -> MachineConfig:
    """The bundled naval machine: reflectors B/C, Beta/Gamma, rotors I-VIII."""
    text = resources.files("enigmasim.data").joinpath(filename).read_text(encoding="utf-8")
    return read_config(text)
