# alphabet.py
from __future__ import annotations

from typing import Iterator

from debug import Debug
from errors import AlphabetError, RangeError

debug = Debug()

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Alphabet:
    """An ordered, duplicate-free set of symbols.

    Symbol number *k* has index *k*; `to_char` and `to_index` are inverses.
    """

    def __init__(self, chars: str = UPPER) -> None:
        if not chars:
            raise AlphabetError("Alphabet must contain at least one symbol")

        self._chars: str = chars
        self._alpha_to_index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch in self._alpha_to_index:
                raise AlphabetError(f"Duplicate symbol {ch!r} in alphabet")
            self._alpha_to_index[ch] = i

        debug.log("alphabet", f"{len(chars)} symbols: {chars}")

    @property
    def chars(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._alpha_to_index

    # symbol → integer signal
    def to_index(self, ch: str) -> int:
        try:
            return self._alpha_to_index[ch]
        except KeyError:
            raise RangeError(f"Symbol {ch!r} is not in the alphabet") from None

    # integer signal → symbol
    def to_char(self, index: int) -> str:
        if not (0 <= index < len(self._chars)):
            hi = len(self._chars) - 1
            raise RangeError(f"Index {index} out of range 0–{hi}")
        return self._chars[index]

    # ── niceties --------------------------------------------------
    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and ch in self._alpha_to_index

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"<Alphabet {self._chars!r}>"
