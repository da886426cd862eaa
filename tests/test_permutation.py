from __future__ import annotations

import pytest

from enigmasim.core import Alphabet, NotInAlphabet, Permutation, PermutationError
from enigmasim.core.permutation import parse_cycles

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ROTOR_I = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"
ROTOR_I_WIRING = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"


def _check_perm(perm: Permutation, from_alpha: str, to_alpha: str) -> None:
    assert perm.size() == len(from_alpha)
    for i, (c, e) in enumerate(zip(from_alpha, to_alpha)):
        assert perm.permute_char(c) == e, f"wrong translation of {c!r}"
        assert perm.invert_char(e) == c, f"wrong inverse of {e!r}"
        ci, ei = from_alpha.index(c), from_alpha.index(e)
        assert perm.permute(ci) == ei
        assert perm.invert(ei) == ci


def test_identity():
    perm = Permutation("", Alphabet())
    _check_perm(perm, UPPER, UPPER)
    assert not perm.derangement()


def test_naval_rotor_i():
    perm = Permutation(ROTOR_I, Alphabet())
    _check_perm(perm, UPPER, ROTOR_I_WIRING)


def test_small_cycles():
    perm = Permutation("(BACD)", Alphabet("ABCD"))
    _check_perm(perm, "ABCD", "CADB")
    assert perm.derangement()


def test_adjacent_groups_without_spaces():
    perm = Permutation("(YF)(HZ)  (MS)\n(AP)(LI)", Alphabet())
    assert perm.permute_char("Y") == "F"
    assert perm.permute_char("Z") == "H"
    assert perm.invert_char("P") == "A"
    assert perm.permute_char("Q") == "Q"


def test_inverse_everywhere():
    perm = Permutation("(AELTPHQXRU) (BKNW) (CMOY)", Alphabet())
    for x in range(26):
        assert perm.invert(perm.permute(x)) == x
        assert perm.permute(perm.invert(x)) == x


def test_index_arithmetic_wraps():
    perm = Permutation("(ABC)", Alphabet("ABCD"))
    assert perm.permute(4) == perm.permute(0) == 1
    assert perm.permute(-1) == perm.permute(3) == 3
    assert perm.invert(-4) == perm.invert(0) == 2
    assert perm.wrap(-5) == 3


def test_singleton_cycle_is_not_a_derangement():
    perm = Permutation("(BCD) (A)", Alphabet("ABCD"))
    assert perm.permute_char("A") == "A"
    assert not perm.derangement()


def test_partial_cover_is_not_a_derangement():
    assert not Permutation("(AB)", Alphabet("ABC")).derangement()
    assert Permutation("(AB) (CD)", Alphabet("ABCD")).derangement()


def test_derangement_matches_fixed_points():
    alpha = Alphabet("ABCDE")
    for cycles in ["(ABCDE)", "(AB) (CDE)", "(AB) (CD)", "(A) (BCDE)", ""]:
        perm = Permutation(cycles, alpha)
        has_fixed = any(perm.permute(x) == x for x in range(alpha.size()))
        assert perm.derangement() == (not has_fixed), cycles


@pytest.mark.parametrize(
    "cycles",
    [
        "(BAC) (DEF)",  # E, F not in alphabet
        "(BAC) (ABC)",  # repeats
        "(BAC) (A)",  # singleton repeat
        "(ABCD) (   )",  # empty group
        "(220923)",
        "(BA C D E G)",
        "(A B C D)",
        "ABCD",
        "(AB",
        "(AB) x",
        "()",
        "(A*B)",
    ],
)
def test_bad_cycles(cycles):
    with pytest.raises(PermutationError):
        Permutation(cycles, Alphabet("ABCD"))


def test_parse_cycles():
    assert parse_cycles("(AB)(CD) (E)") == ["AB", "CD", "E"]
    assert parse_cycles("   ") == []


def test_foreign_character():
    perm = Permutation("(AB)", Alphabet("ABC"))
    with pytest.raises(NotInAlphabet):
        perm.permute_char("Z")
    with pytest.raises(NotInAlphabet):
        perm.invert_char("Z")
