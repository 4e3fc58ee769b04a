"""Shared fixtures for the rotor machine tests."""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from alphabet import Alphabet  # noqa: E402
from config import load_config  # noqa: E402
from debug import COMPONENTS, Debug  # noqa: E402

# Published wirings, symbol i maps to wiring[i].
WIRINGS = {
    "I": "EKMFLGDQVZNTOWYHXUSPAIBRCJ",
    "II": "AJDKSIRUXBLHWTMCQGZNPYFVOE",
    "III": "BDFHJLCPRTXVZNYEIWGAKMUSQO",
    "IV": "ESOVPZJAYQUIRHXLNFTGKDCMWB",
    "V": "VZBRGITYUPSDNHLXAWMJQOFECK",
    "VI": "JPGVOUMFYQBENHZRDKASXLICTW",
    "VII": "NZJHGRCXMYSWBOUFAIVLPEKQDT",
    "VIII": "FKQHTLXOCBJSPDZRAMEWNIUYGV",
    "Beta": "LEYJVCNIXWPBQMDRTAKZGFUHOS",
    "Gamma": "FSOKANUERHMBTIYCWLQPZXVGJD",
}


@pytest.fixture(autouse=True)
def quiet_debug():
    """Leave every debug component switched off between tests."""
    dbg = Debug()
    dbg.toggle_global(True)
    dbg.disable(*COMPONENTS)
    yield dbg
    dbg.disable(*COMPONENTS)


@pytest.fixture
def configs_dir():
    return ROOT / "configs"


@pytest.fixture
def upper():
    return Alphabet()


@pytest.fixture
def enigma_i(configs_dir):
    """Three-rotor machine with reflectors B and C (wide)."""
    return load_config(configs_dir / "enigma_i.conf")


@pytest.fixture
def m4(configs_dir):
    """Four-rotor naval machine: thin reflector plus a fixed Greek rotor."""
    return load_config(configs_dir / "m4.conf")
