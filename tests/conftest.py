from __future__ import annotations

import pytest

from enigmasim.config import load_default_config
from enigmasim.core import Alphabet, Machine, Permutation, RotorSpec


@pytest.fixture
def upper() -> Alphabet:
    return Alphabet()


@pytest.fixture
def naval():
    return load_default_config()


@pytest.fixture
def naval_machine(naval) -> Machine:
    m = naval.build_machine()
    m.insert_rotors(["B", "Beta", "III", "IV", "I"])
    m.set_rotors("AXLE")
    return m


@pytest.fixture
def abc_machine() -> Machine:
    """Reflector plus three moving rotors over "ABC", all notched at C."""
    abc = Alphabet("ABC")
    catalog = [
        RotorSpec.reflector("1", Permutation("(ABC)", abc)),
        RotorSpec.moving("2", Permutation("(ABC)", abc), "C"),
        RotorSpec.moving("3", Permutation("(ABC)", abc), "C"),
        RotorSpec.moving("4", Permutation("(ABC)", abc), "C"),
    ]
    m = Machine(abc, 4, 3, catalog)
    m.insert_rotors(["1", "2", "3", "4"])
    m.set_rotors("AAA")
    m.set_plugboard(Permutation("(ABC)", abc))
    return m
