from __future__ import annotations

from .errors import ConfigurationError, NotInAlphabet, OutOfRange

# Characters used by the cycle and settings-line notation.
RESERVED = frozenset("*()")

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Alphabet:
    """Ordered set of unique characters, numbered 0..size()-1."""

    def __init__(self, chars: str = UPPER) -> None:
        if not chars:
            raise ConfigurationError("An alphabet needs at least one character.")
        bad = sorted(set(chars) & RESERVED)
        if bad:
            raise ConfigurationError(
                f"The alphabet {chars!r} may not contain {', '.join(bad)}."
            )

        self._chars = chars
        self._index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch in self._index:
                raise ConfigurationError(f"Duplicate character {ch!r} in alphabet {chars!r}.")
            self._index[ch] = i

    @property
    def chars(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    def to_char(self, index: int) -> str:
        if not 0 <= index < self.size():
            raise OutOfRange(f"Index {index} is out of bounds for an alphabet of size {self.size()}.")
        return self._chars[index]

    def to_int(self, ch: str) -> int:
        try:
            return self._index[ch]
        except KeyError:
            raise NotInAlphabet(f"The alphabet does not contain {ch!r}.") from None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Alphabet) and other._chars == self._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"
