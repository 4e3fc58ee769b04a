"""Tests for plugboard swap validation."""
import pytest

from alphabet import Alphabet
from errors import ConfigurationError, CycleSyntaxError, UnknownSymbolError
from plugboard import Plugboard


class TestPlugboardSwaps:
    def test_pairs_swap_both_ways(self, upper):
        pb = Plugboard(["AB", ("C", "D")], upper)
        assert pb.permute_char("A") == "B"
        assert pb.permute_char("B") == "A"
        assert pb.permute_char("D") == "C"
        assert pb.invert_char("C") == "D"
        assert pb.permute_char("Z") == "Z"

    def test_cycles_notation(self, upper):
        assert Plugboard(["YF", "ZH"], upper).cycles == "(YF) (ZH)"

    def test_identity(self, upper):
        pb = Plugboard.identity(upper)
        assert all(pb.permute(i) == i for i in range(26))

    def test_repr_lists_swaps(self, upper):
        assert repr(Plugboard(["AB", "CD"], upper)) == "<Plugboard AB CD>"


class TestPlugboardErrors:
    def test_pair_must_have_two_symbols(self, upper):
        with pytest.raises(CycleSyntaxError):
            Plugboard(["ABC"], upper)

    def test_self_pair(self, upper):
        with pytest.raises(ConfigurationError):
            Plugboard(["AA"], upper)

    def test_symbol_reused(self, upper):
        with pytest.raises(ConfigurationError, match="already used"):
            Plugboard(["AB", "BC"], upper)

    def test_symbol_outside_alphabet(self):
        with pytest.raises(UnknownSymbolError):
            Plugboard(["AZ"], Alphabet("ABCD"))
