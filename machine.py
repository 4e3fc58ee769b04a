# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from alphabet import Alphabet
from debug import Debug
from errors import (
    AlphabetError,
    ConfigurationError,
    DuplicateRotorError,
    LengthError,
    UnknownRotorError,
)
from permutation import Permutation
from plugboard import Plugboard
from rotor_and_reflector import Rotor

debug = Debug()


class Machine:
    """A complete rotor machine.

    Slot 0 always holds the reflector; the rightmost `pawls` slots may
    move.  Rotors are drawn by name from `all_rotors`, which the machine
    never modifies except for the settings of the rotors it has inserted.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        all_rotors: Iterable[Rotor],
    ) -> None:
        if num_rotors <= 1:
            raise ConfigurationError("Machine needs a reflector and at least one rotor")
        if not (0 <= pawls < num_rotors):
            raise ConfigurationError(f"Pawl count {pawls} must be in 0–{num_rotors - 1}")

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = pawls

        self._all_rotors: dict[str, Rotor] = {}
        for rotor in all_rotors:
            if rotor.name in self._all_rotors:
                raise ConfigurationError(f"Rotor {rotor.name} defined twice")
            if rotor.alphabet != alphabet:
                raise ConfigurationError(f"Rotor {rotor.name} uses a different alphabet")
            self._all_rotors[rotor.name] = rotor

        self._slots: list[Rotor | None] = [None] * num_rotors
        self._plugboard: Permutation = Plugboard.identity(alphabet)

    # ── read-only views ─────────────────────────────────────────

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def num_rotors(self) -> int:
        return self._num_rotors

    @property
    def pawls(self) -> int:
        return self._pawls

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    @property
    def rotors(self) -> tuple[Rotor | None, ...]:
        """Slot occupants, left (reflector) to right."""
        return tuple(self._slots)

    def available_rotors(self) -> list[str]:
        return list(self._all_rotors)

    def rotor(self, name: str) -> Rotor:
        try:
            return self._all_rotors[name]
        except KeyError:
            raise UnknownRotorError(f"Bad rotor name: {name}") from None

    def positions(self) -> str:
        """Window letters of slots 1..n-1, as a setting string."""
        return "".join(
            self._alphabet.to_char(r.setting) for r in self._slots[1:] if r is not None
        )

    # ── configuration ───────────────────────────────────────────

    def insert_rotors(self, rotors: Sequence[str]) -> None:
        """Fill my slots with the rotors named ROTORS (ROTORS[0] is the
        reflector).  The previous assignment is discarded."""
        seen: set[str] = set()
        for name in rotors:
            if name in seen:
                raise DuplicateRotorError(f"Rotor {name} named twice")
            seen.add(name)

        if len(rotors) != self._num_rotors:
            raise ConfigurationError(
                f"{len(rotors)} rotors named for {self._num_rotors} slots"
            )

        slots = [self.rotor(name) for name in rotors]
        if not slots[0].reflecting():
            raise ConfigurationError("Reflector in wrong place")
        for i, rotor in enumerate(slots):
            if i > 0 and rotor.reflecting():
                raise ConfigurationError(f"Reflector {rotor.name} in slot {i}")

        self._slots = slots
        debug.log("machine", f"slots {[r.name for r in slots]}")

    def set_rotors(self, setting: str, ring: str = "") -> None:
        """Set slots 1..n-1 to the window letters of SETTING and the ring
        offsets of RING (all first-symbol when RING is empty)."""
        self._require_slots()
        ring = self.check_settings(setting, ring)
        for rotor, posn, ring_posn in zip(self._slots[1:], setting, ring):
            rotor.set(posn)
            rotor.set_ring(ring_posn)
        debug.log("machine", f"setting {setting} ring {ring}")

    def check_settings(self, setting: str, ring: str = "") -> str:
        """Raise unless SETTING and RING fit my moving slots.  Returns RING,
        filled with the first symbol when empty."""
        if not ring:
            ring = self._alphabet.to_char(0) * (self._num_rotors - 1)

        for label, value in (("setting", setting), ("ring", ring)):
            if len(value) != self._num_rotors - 1:
                raise LengthError(
                    f"{label} {value!r} needs {self._num_rotors - 1} symbols"
                )
            for ch in value:
                if ch not in self._alphabet:
                    raise AlphabetError(f"{label} symbol {ch!r} not in alphabet")
        return ring

    def set_plugboard(self, plugboard: Permutation) -> None:
        if plugboard.alphabet != self._alphabet:
            raise ConfigurationError("Plugboard uses a different alphabet")
        self._plugboard = plugboard

    def _require_slots(self) -> None:
        if any(r is None for r in self._slots):
            raise ConfigurationError("Rotors have not been inserted")

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors one key-press.

        Decisions use the notch positions from before this key-press:
        the rightmost pawl slot always steps, a rotor steps when its right
        neighbour is at a notch, and a rotor at a notch steps along with
        its left neighbour when that neighbour has a pawl (double step).
        """
        n = self._num_rotors
        first = n - self._pawls
        notched = [r.at_notch() for r in self._slots]

        advance = [False] * n
        for i in range(first, n):
            if i == n - 1 or notched[i + 1]:
                advance[i] = True
            if notched[i] and i - 1 >= first:
                advance[i] = True

        for rotor, go in zip(self._slots, advance):
            if go:
                rotor.advance()
        if debug.active("stepping"):
            debug.log("stepping", f"positions {self.positions()}")

    # ── encipher one symbol  ────────────────────────────────────

    def convert(self, c: int) -> int:
        """Return the conversion of index C, after first advancing the
        machine."""
        self._require_slots()
        signal = self._plugboard.permute(c)
        self._step_rotors()

        for rotor in reversed(self._slots):
            signal = rotor.convert_forward(signal)

        for rotor in self._slots[1:]:
            signal = rotor.convert_backward(signal)

        return self._plugboard.invert(signal)

    def convert_message(self, msg: str) -> str:
        """Convert MSG symbol by symbol; spaces pass through unchanged."""
        self._require_slots()
        for ch in msg:
            if ch != " " and ch not in self._alphabet:
                raise AlphabetError(f"Invalid character {ch!r} for current alphabet.")

        out: list[str] = []
        for ch in msg:
            if ch == " ":
                out.append(ch)
                continue
            out.append(self._alphabet.to_char(self.convert(self._alphabet.to_index(ch))))
        return "".join(out)

    def __repr__(self) -> str:
        names = [r.name if r else "-" for r in self._slots]
        return f"<Machine slots={names} pawls={self._pawls}>"
