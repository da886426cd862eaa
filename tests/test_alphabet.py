from __future__ import annotations

import pytest

from enigmasim.core import Alphabet, ConfigurationError, NotInAlphabet, OutOfRange


def test_default_is_upper_case():
    a = Alphabet()
    assert a.size() == 26
    assert a.to_char(0) == "A"
    assert a.to_int("Z") == 25


def test_round_trip():
    a = Alphabet("QWERTY12_")
    for i, ch in enumerate("QWERTY12_"):
        assert a.to_int(ch) == i
        assert a.to_char(a.to_int(ch)) == ch
        assert a.to_int(a.to_char(i)) == i


def test_contains():
    a = Alphabet("ABC")
    assert a.contains("B")
    assert "C" in a
    assert not a.contains("D")
    assert len(a) == 3


@pytest.mark.parametrize("chars", ["AB*C", "(ABC", "ABC)", ""])
def test_rejects_reserved_and_empty(chars):
    with pytest.raises(ConfigurationError):
        Alphabet(chars)


def test_rejects_duplicates():
    with pytest.raises(ConfigurationError, match="Duplicate"):
        Alphabet("ABCA")


def test_lookup_errors():
    a = Alphabet("ABC")
    with pytest.raises(NotInAlphabet):
        a.to_int("D")
    with pytest.raises(OutOfRange):
        a.to_char(3)
    with pytest.raises(OutOfRange):
        a.to_char(-1)
