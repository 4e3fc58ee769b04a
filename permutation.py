# permutation.py
from __future__ import annotations

from alphabet import Alphabet
from debug import Debug
from errors import ConfigurationError, CycleSyntaxError, UnknownSymbolError

debug = Debug()


class Permutation:
    """A bijection on the indices of an Alphabet, given in cycle notation.

    ``Permutation("(ABC) (DE)", alpha)`` maps A→B, B→C, C→A, D→E, E→D and
    every other symbol to itself.  Whitespace in the notation is ignored.
    Integer arguments are taken modulo the alphabet size, so ``permute(-1)``
    is the image of the last symbol.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        size = alphabet.size()

        # integer lookup tables, identity until a cycle says otherwise
        self._fwd: list[int] = list(range(size))
        self._rev: list[int] = list(range(size))
        self._cycled: set[int] = set()
        self._cycles: tuple[str, ...] = tuple(self._parse(cycles))

        for cycle in self._cycles:
            self._add_cycle(cycle)
        debug.log("permutation", f"{self!r}")

    @classmethod
    def from_wiring(cls, wiring: str, alphabet: Alphabet) -> "Permutation":
        """Build from a wiring string where symbol *i* maps to ``wiring[i]``."""
        if sorted(wiring) != sorted(alphabet.chars):
            raise ConfigurationError("wiring must be a permutation of alphabet")

        seen: set[str] = set()
        cycles: list[str] = []
        for start in alphabet:
            if start in seen:
                continue
            cycle, ch = [], start
            while ch not in seen:
                seen.add(ch)
                cycle.append(ch)
                ch = wiring[alphabet.to_index(ch)]
            cycles.append("(" + "".join(cycle) + ")")
        return cls(" ".join(cycles), alphabet)

    # ── parsing ──────────────────────────────────────────────────
    def _parse(self, notation: str) -> list[str]:
        cycles: list[str] = []
        current: list[str] | None = None
        used: set[str] = set()

        for ch in notation:
            if ch.isspace():
                continue
            if ch == "(":
                if current is not None:
                    raise CycleSyntaxError(f"Nested '(' in {notation!r}")
                current = []
            elif ch == ")":
                if current is None:
                    raise CycleSyntaxError(f"Unmatched ')' in {notation!r}")
                cycles.append("".join(current))
                current = None
            elif current is None:
                raise CycleSyntaxError(f"Symbol {ch!r} outside any cycle in {notation!r}")
            else:
                if ch not in self._alphabet:
                    raise UnknownSymbolError(f"Symbol {ch!r} in cycle is not in the alphabet")
                if ch in used:
                    raise CycleSyntaxError(f"Symbol {ch!r} appears twice in {notation!r}")
                used.add(ch)
                current.append(ch)

        if current is not None:
            raise CycleSyntaxError(f"Unclosed cycle in {notation!r}")
        return cycles

    def _add_cycle(self, cycle: str) -> None:
        """Add c0->c1->...->cm->c0 to the lookup tables."""
        idx = [self._alphabet.to_index(ch) for ch in cycle]
        for a, b in zip(idx, idx[1:] + idx[:1]):
            self._fwd[a] = b
            self._rev[b] = a
            self._cycled.add(a)

    # ── integer interface ────────────────────────────────────────
    def wrap(self, p: int) -> int:
        """Return *p* modulo the size of this permutation."""
        return p % self.size()

    def size(self) -> int:
        return self._alphabet.size()

    def permute(self, p: int) -> int:
        return self._fwd[self.wrap(p)]

    def invert(self, c: int) -> int:
        return self._rev[self.wrap(c)]

    # ── symbol interface ─────────────────────────────────────────
    def permute_char(self, p: str) -> str:
        return self._alphabet.to_char(self._fwd[self._symbol_index(p)])

    def invert_char(self, c: str) -> str:
        return self._alphabet.to_char(self._rev[self._symbol_index(c)])

    def _symbol_index(self, ch: str) -> int:
        if ch not in self._alphabet:
            raise UnknownSymbolError(f"Symbol {ch!r} is not in the alphabet")
        return self._alphabet.to_index(ch)

    # ── properties ───────────────────────────────────────────────
    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def cycles(self) -> str:
        return " ".join(f"({c})" for c in self._cycles)

    def derangement(self) -> bool:
        """True iff every symbol is in some cycle and none maps to itself."""
        return all(
            i in self._cycled and self._fwd[i] != i
            for i in range(self.size())
        )

    def __repr__(self) -> str:
        return f"<Permutation {self.cycles or '()'} over {len(self._alphabet)} symbols>"
