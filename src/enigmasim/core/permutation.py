from __future__ import annotations

import re

from .alphabet import Alphabet
from .errors import NotInAlphabet, PermutationError

# Whole cycle text: any number of "(...)" groups, optionally whitespace separated.
_CYCLES_RE = re.compile(r"\s*(?:\([^\s*()]+\)\s*)*")
_GROUP_RE = re.compile(r"\(([^\s*()]+)\)")


def parse_cycles(cycles: str) -> list[str]:
    """
    Split cycle notation like "(AELT) (BKNW)(S)" into ["AELT", "BKNW", "S"].
    Raises PermutationError when the text is not a sequence of groups.
    """
    if _CYCLES_RE.fullmatch(cycles) is None:
        raise PermutationError(
            f"Cycles {cycles!r} are incorrectly formatted; expected groups like '(ABC) (DE)'."
        )
    return _GROUP_RE.findall(cycles)


class Permutation:
    """
    A permutation of an alphabet's indices, given in cycle notation.

    "(ABC) (DE)" maps A->B, B->C, C->A, D->E, E->D. Characters that are in
    no cycle map to themselves.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._cycles = cycles

        groups = parse_cycles(cycles)
        seen: set[str] = set()
        for group in groups:
            for ch in group:
                if not alphabet.contains(ch):
                    raise PermutationError(
                        f"Cycles {cycles!r} use {ch!r}, which is not in the alphabet."
                    )
                if ch in seen:
                    raise PermutationError(f"Cycles {cycles!r} repeat the character {ch!r}.")
                seen.add(ch)

        n = alphabet.size()
        self._forward = [-1] * n
        for group in groups:
            idx = [alphabet.to_int(ch) for ch in group]
            for a, b in zip(idx, idx[1:] + idx[:1]):
                self._forward[a] = b

        # True only while every character is covered by an explicit cycle.
        self._all_cycled = True
        for i in range(n):
            if self._forward[i] < 0:
                self._forward[i] = i
                self._all_cycled = False

        self._inverse = [0] * n
        for i, j in enumerate(self._forward):
            self._inverse[j] = i

    @property
    def cycles(self) -> str:
        return self._cycles

    def alphabet(self) -> Alphabet:
        return self._alphabet

    def size(self) -> int:
        return self._alphabet.size()

    def wrap(self, p: int) -> int:
        """Return p modulo size(), always non-negative."""
        return p % self.size()

    def permute(self, p: int) -> int:
        return self._forward[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._inverse[self.wrap(c)]

    def permute_char(self, ch: str) -> str:
        if not self._alphabet.contains(ch):
            raise NotInAlphabet(f"{ch!r} is not in the alphabet of this permutation.")
        return self._alphabet.to_char(self.permute(self._alphabet.to_int(ch)))

    def invert_char(self, ch: str) -> str:
        if not self._alphabet.contains(ch):
            raise NotInAlphabet(f"{ch!r} is not in the alphabet of this permutation.")
        return self._alphabet.to_char(self.invert(self._alphabet.to_int(ch)))

    def derangement(self) -> bool:
        """True iff no character maps to itself."""
        if not self._all_cycled:
            return False
        return all(i != j for i, j in enumerate(self._forward))

    def __repr__(self) -> str:
        return f"Permutation({self._cycles!r}, {self._alphabet!r})"
