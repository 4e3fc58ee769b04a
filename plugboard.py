# plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from alphabet import Alphabet
from debug import Debug
from errors import ConfigurationError, CycleSyntaxError, UnknownSymbolError
from permutation import Permutation

debug = Debug()


class Plugboard(Permutation):
    """A Permutation made only of disjoint two-symbol swaps."""

    def __init__(
        self,
        pairs: Sequence[str | tuple[str, str]],
        alphabet: Alphabet,
    ) -> None:
        used: set[str] = set()
        swaps: list[str] = []

        for raw in pairs:
            # normalise to (a, b)
            if len(raw) != 2:
                raise CycleSyntaxError(f"Pair {raw!r} must be exactly 2 symbols")
            a, b = raw

            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a symbol to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Character {dup!r} already used in plugboard")
            if a not in alphabet or b not in alphabet:
                bad = a if a not in alphabet else b
                raise UnknownSymbolError(f"Symbol {bad!r} not in alphabet")

            swaps.append(f"({a}{b})")
            used.update((a, b))

        super().__init__(" ".join(swaps), alphabet)
        debug.log("plugboard", f"{len(swaps)} swaps: {' '.join(swaps) or 'none'}")

    @classmethod
    def identity(cls, alphabet: Alphabet) -> "Plugboard":
        return cls([], alphabet)

    def __repr__(self) -> str:
        return f"<Plugboard {self.cycles.replace('(', '').replace(')', '')}>"
