# rotor_and_reflector.py
from __future__ import annotations

from alphabet import Alphabet
from debug import Debug
from errors import ConfigurationError, UnknownSymbolError, UsageError
from permutation import Permutation

debug = Debug()


class Rotor:
    """One permutation layer of the signal path plus a rotational offset.

    The base class neither moves nor reflects; `MovingRotor`, `FixedRotor`
    and `Reflector` refine it.
    """

    def __init__(self, name: str, perm: Permutation) -> None:
        self._name = name
        self._permutation = perm
        self._setting = 0
        self._ring = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def alphabet(self) -> Alphabet:
        return self._permutation.alphabet

    @property
    def permutation(self) -> Permutation:
        return self._permutation

    def size(self) -> int:
        return self._permutation.size()

    # ── capabilities ─────────────────────────────────────────────
    def rotates(self) -> bool:
        return False

    def reflecting(self) -> bool:
        return False

    # ── setting & ring ───────────────────────────────────────────
    @property
    def setting(self) -> int:
        return self._setting

    @property
    def ring(self) -> int:
        return self._ring

    def set(self, posn: int | str) -> None:
        """Rotate to *posn*, an index or a symbol of my alphabet."""
        self._setting = self._position(posn)

    def set_ring(self, posn: int | str) -> None:
        self._ring = self._position(posn)

    def _position(self, posn: int | str) -> int:
        if isinstance(posn, str):
            if posn not in self.alphabet:
                raise UnknownSymbolError(f"Rotor {self._name}: {posn!r} not in alphabet")
            return self.alphabet.to_index(posn)
        return self._permutation.wrap(posn)

    # ── signal paths ---------------------------------------------
    def convert_forward(self, p: int) -> int:
        offset = self._setting - self._ring
        entered = self._permutation.wrap(p + offset)
        mapped = self._permutation.permute(entered)
        return self._permutation.wrap(mapped - offset)

    def convert_backward(self, e: int) -> int:
        offset = self._setting - self._ring
        entered = self._permutation.wrap(e + offset)
        mapped = self._permutation.invert(entered)
        return self._permutation.wrap(mapped - offset)

    # ── stepping --------------------------------------------------
    def at_notch(self) -> bool:
        """True iff I let the rotor on my left advance."""
        return False

    def advance(self) -> None:
        """Advance one position, if I can.  By default, does nothing."""

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name} pos={self._setting} ring={self._ring}>"


class MovingRotor(Rotor):
    def __init__(self, name: str, perm: Permutation, notches: str) -> None:
        super().__init__(name, perm)
        if not set(notches) <= set(perm.alphabet):
            raise UnknownSymbolError("Notch characters must be in the alphabet")
        self._notches = frozenset(notches)

    @property
    def notches(self) -> frozenset[str]:
        return self._notches

    def rotates(self) -> bool:
        return True

    def at_notch(self) -> bool:
        return self.alphabet.to_char(self.setting) in self._notches

    def advance(self) -> None:
        self._setting = self._permutation.wrap(self._setting + 1)
        debug.log("rotor", f"{self.name} -> {self.alphabet.to_char(self._setting)}")


class FixedRotor(Rotor):
    """A rotor that sits still: no ratchet, no notches."""


class Reflector(FixedRotor):
    def __init__(self, name: str, perm: Permutation) -> None:
        super().__init__(name, perm)
        self._deranged: bool | None = None

    def reflecting(self) -> bool:
        return True

    def set(self, posn: int | str) -> None:
        if self._position(posn) != 0:
            raise ConfigurationError(f"Reflector {self.name} has only one position")
        self._setting = 0

    def convert_forward(self, p: int) -> int:
        if self._deranged is None:
            self._deranged = self._permutation.derangement()
            debug.log("reflector", f"{self.name} derangement={self._deranged}")
        if not self._deranged:
            raise ConfigurationError(f"Reflector {self.name} must be a derangement")
        return self._permutation.permute(p)

    def convert_backward(self, e: int) -> int:
        raise UsageError(f"Reflector {self.name} cannot convert backward")
