# config.py
"""Readers for machine description files and per-message settings lines.

A machine description is whitespace-separated::

    ABCDEFGHIJKLMNOPQRSTUVWXYZ
    5 3
    I MQ      (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
    Beta N    (ALBEVFCYODJWUGNMQTZSKPR) (HIX)
    B R       (AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP)
              (RX) (SZ) (TV)

and a settings line names the slots, the window letters, an optional ring
string and optional plugboard swaps::

    * B Beta III IV I AXLE (HQ) (EX)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from alphabet import Alphabet
from debug import Debug
from errors import ConfigurationError, CycleSyntaxError
from machine import Machine
from permutation import Permutation
from plugboard import Plugboard
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector, Rotor

debug = Debug()

RESERVED = "()*"
SETTINGS_MARKER = "*"


# ────────────────────────────────────────────────────────────────────────
#  0. Small helpers
# ────────────────────────────────────────────────────────────────────────


def _is_cycle_token(token: str) -> bool:
    return token.startswith("(")


def _check_cycle_token(token: str) -> None:
    if not (token.startswith("(") and token.endswith(")")):
        raise CycleSyntaxError(f"Incorrect cycle {token!r}")


def read_alphabet(chars: str) -> Alphabet:
    bad = [ch for ch in RESERVED if ch in chars]
    if bad:
        raise ConfigurationError(f"Alphabet cannot contain {', '.join(map(repr, bad))}")
    return Alphabet(chars)


def _read_int(tokens: List[str], pos: int, what: str) -> int:
    if pos >= len(tokens):
        raise ConfigurationError(f"configuration file truncated before {what}")
    try:
        return int(tokens[pos])
    except ValueError:
        raise ConfigurationError(f"{what} must be an integer, got {tokens[pos]!r}") from None


# ────────────────────────────────────────────────────────────────────────
#  1. Machine descriptions
# ────────────────────────────────────────────────────────────────────────


def read_rotor(name: str, kind: str, cycles: str, alphabet: Alphabet) -> Rotor:
    """Build one rotor from its NAME, type tag KIND and CYCLES."""
    perm = Permutation(cycles, alphabet)
    tag, notches = kind[:1], kind[1:]

    if tag == "M":
        if not notches:
            raise ConfigurationError(f"Moving rotor {name} needs at least one notch")
        return MovingRotor(name, perm, notches)
    if notches:
        raise ConfigurationError(f"Rotor {name}: only moving rotors take notches")
    if tag == "N":
        return FixedRotor(name, perm)
    if tag == "R":
        return Reflector(name, perm)
    raise ConfigurationError(f"Rotor {name}: wrong rotor type {kind!r}")


def read_config(text: str) -> Machine:
    """Return a Machine built from the machine description TEXT."""
    tokens = text.split()
    if not tokens:
        raise ConfigurationError("configuration file is empty")

    alphabet = read_alphabet(tokens[0])
    num_rotors = _read_int(tokens, 1, "number of rotors")
    if num_rotors <= 0:
        raise ConfigurationError("Num rotors cannot be <= 0")
    pawls = _read_int(tokens, 2, "number of pawls")

    rotors: list[Rotor] = []
    names: set[str] = set()
    pos = 3
    while pos < len(tokens):
        if pos + 1 >= len(tokens):
            raise ConfigurationError(f"bad rotor description for {tokens[pos]!r}")
        name, kind = tokens[pos], tokens[pos + 1]
        if _is_cycle_token(name) or _is_cycle_token(kind):
            raise ConfigurationError(f"bad rotor description near {name!r}")
        pos += 2

        cycles: list[str] = []
        while pos < len(tokens) and _is_cycle_token(tokens[pos]):
            _check_cycle_token(tokens[pos])
            cycles.append(tokens[pos])
            pos += 1

        if name in names:
            raise ConfigurationError(f"Rotor {name} defined twice")
        names.add(name)
        rotors.append(read_rotor(name, kind, " ".join(cycles), alphabet))
        debug.log("config", f"rotor {name} {kind} {' '.join(cycles)}")

    if not rotors:
        raise ConfigurationError("configuration file names no rotors")
    return Machine(alphabet, num_rotors, pawls, rotors)


def load_config(path: str | Path) -> Machine:
    return read_config(Path(path).read_text(encoding="utf-8"))


# ────────────────────────────────────────────────────────────────────────
#  2. Settings lines
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Settings:
    """One parsed settings line."""

    rotors: List[str]
    setting: str
    ring: str = ""
    plugs: List[str] = field(default_factory=list)


def is_settings_line(line: str) -> bool:
    return line.startswith(SETTINGS_MARKER)


def parse_settings(line: str, num_rotors: int) -> Settings:
    tokens = line.split()
    if not tokens or tokens[0] != SETTINGS_MARKER:
        raise ConfigurationError(f"Settings line must start with {SETTINGS_MARKER!r}")
    if len(tokens) < num_rotors + 2:
        raise ConfigurationError(f"Settings line truncated: {line.strip()!r}")

    rotors = tokens[1:num_rotors + 1]
    setting = tokens[num_rotors + 1]
    if _is_cycle_token(setting):
        raise ConfigurationError(f"Settings line has no rotor setting: {line.strip()!r}")

    ring = ""
    plugs: list[str] = []
    for token in tokens[num_rotors + 2:]:
        if not _is_cycle_token(token):
            if ring or plugs:
                raise ConfigurationError(f"Unexpected token {token!r} in settings line")
            ring = token
            continue
        _check_cycle_token(token)
        if len(token) != 4:
            raise CycleSyntaxError(f"Incorrect plugboard input {token!r}")
        plugs.append(token[1:3])

    return Settings(rotors, setting, ring, plugs)


def setup(machine: Machine, line: str) -> Settings:
    """Configure MACHINE from the settings LINE and return what was read."""
    settings = parse_settings(line, machine.num_rotors)
    plugboard = Plugboard(settings.plugs, machine.alphabet)
    machine.check_settings(settings.setting, settings.ring)

    machine.insert_rotors(settings.rotors)
    machine.set_rotors(settings.setting, settings.ring)
    machine.set_plugboard(plugboard)
    debug.log("config", f"{settings}")
    return settings


__all__ = [
    "Settings",
    "is_settings_line",
    "load_config",
    "parse_settings",
    "read_alphabet",
    "read_config",
    "read_rotor",
    "setup",
]
