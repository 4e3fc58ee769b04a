"""Tests for moving, fixed and reflecting rotors."""
import pytest

from alphabet import Alphabet
from conftest import WIRINGS
from errors import ConfigurationError, UnknownSymbolError, UsageError
from permutation import Permutation
from rotor_and_reflector import FixedRotor, MovingRotor, Reflector, Rotor

REFLECTOR_B = "(AY) (BR) (CU) (DH) (EQ) (FS) (GL) (IP) (JX) (KN) (MO) (TZ) (VW)"


@pytest.fixture
def rotor_i(upper):
    return MovingRotor("I", Permutation.from_wiring(WIRINGS["I"], upper), "Q")


@pytest.fixture
def reflector_b(upper):
    return Reflector("B", Permutation(REFLECTOR_B, upper))


class TestCapabilities:
    def test_moving_rotor(self, rotor_i):
        assert rotor_i.rotates()
        assert not rotor_i.reflecting()

    def test_fixed_rotor(self, upper):
        beta = FixedRotor("Beta", Permutation.from_wiring(WIRINGS["Beta"], upper))
        assert not beta.rotates()
        assert not beta.reflecting()
        assert not beta.at_notch()

    def test_reflector(self, reflector_b):
        assert reflector_b.reflecting()
        assert not reflector_b.rotates()

    def test_base_rotor_defaults(self, upper):
        r = Rotor("plain", Permutation("", upper))
        assert r.setting == 0
        assert r.ring == 0
        assert r.size() == 26
        assert r.alphabet == upper


class TestConversion:
    def test_forward_at_a(self, rotor_i, upper):
        """At position A rotor I wires A to E."""
        assert rotor_i.convert_forward(upper.to_index("A")) == upper.to_index("E")

    def test_forward_at_b(self, rotor_i, upper):
        """At position B the contact shifts: A enters at B, leaves K shifted back to J."""
        rotor_i.set("B")
        assert rotor_i.convert_forward(upper.to_index("A")) == upper.to_index("J")
        assert rotor_i.convert_backward(upper.to_index("J")) == upper.to_index("A")

    def test_backward_inverts_forward(self, rotor_i):
        for setting in range(26):
            for ring in (0, 5, 25):
                rotor_i.set(setting)
                rotor_i.set_ring(ring)
                for p in range(26):
                    assert rotor_i.convert_backward(rotor_i.convert_forward(p)) == p

    def test_ring_offsets_setting(self, upper):
        """Setting s with ring r behaves like setting s-r with ring 0."""
        perm = Permutation.from_wiring(WIRINGS["II"], upper)
        shifted = MovingRotor("II", perm, "E")
        plain = MovingRotor("II", perm, "E")
        shifted.set("H")
        shifted.set_ring("C")
        plain.set("F")
        assert [shifted.convert_forward(p) for p in range(26)] == \
            [plain.convert_forward(p) for p in range(26)]


class TestSettings:
    def test_set_by_symbol_or_index(self, rotor_i):
        rotor_i.set("C")
        assert rotor_i.setting == 2
        rotor_i.set(27)
        assert rotor_i.setting == 1
        rotor_i.set_ring("Z")
        assert rotor_i.ring == 25

    def test_set_unknown_symbol(self, rotor_i):
        with pytest.raises(UnknownSymbolError):
            rotor_i.set("a")

    def test_notches_must_be_in_alphabet(self):
        alpha = Alphabet("ABCD")
        with pytest.raises(UnknownSymbolError):
            MovingRotor("X", Permutation("(ABCD)", alpha), "E")


class TestStepping:
    def test_advance_wraps(self, rotor_i):
        rotor_i.set("Z")
        rotor_i.advance()
        assert rotor_i.setting == 0

    def test_at_notch(self, rotor_i):
        rotor_i.set("P")
        assert not rotor_i.at_notch()
        rotor_i.advance()
        assert rotor_i.at_notch()
        rotor_i.advance()
        assert not rotor_i.at_notch()

    def test_fixed_rotor_does_not_advance(self, upper):
        beta = FixedRotor("Beta", Permutation.from_wiring(WIRINGS["Beta"], upper))
        beta.set("D")
        beta.advance()
        assert beta.setting == 3

    def test_several_notches(self, upper):
        vi = MovingRotor("VI", Permutation.from_wiring(WIRINGS["VI"], upper), "ZM")
        assert vi.notches == frozenset("ZM")
        vi.set("M")
        assert vi.at_notch()
        vi.set("Z")
        assert vi.at_notch()


class TestReflector:
    def test_reflects_pairs(self, reflector_b, upper):
        assert reflector_b.convert_forward(upper.to_index("A")) == upper.to_index("Y")
        assert reflector_b.convert_forward(upper.to_index("Y")) == upper.to_index("A")

    def test_position_zero_allowed(self, reflector_b):
        reflector_b.set(0)
        reflector_b.set("A")
        assert reflector_b.setting == 0

    def test_nonzero_position_rejected(self, reflector_b):
        with pytest.raises(ConfigurationError):
            reflector_b.set(3)
        with pytest.raises(ConfigurationError):
            reflector_b.set("B")

    def test_backward_is_unsupported(self, reflector_b):
        with pytest.raises(UsageError):
            reflector_b.convert_backward(0)

    def test_non_derangement_fails_on_first_use(self, upper):
        """Construction succeeds; the wiring is checked when a signal arrives."""
        bad = Reflector("X", Permutation("(AB) (CD)", upper))
        with pytest.raises(ConfigurationError, match="derangement"):
            bad.convert_forward(0)
        with pytest.raises(ConfigurationError):
            bad.convert_forward(1)
