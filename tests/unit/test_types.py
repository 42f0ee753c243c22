"""Unit tests for the Address and PrefixedAddress value types."""

import pytest

from ipv6addr import Address, Grammar, PrefixedAddress, parse


class TestAddress:
    def test_list_input_stored_as_tuple(self):
        addr = Address([0, 0, 0, 0, 0, 0, 0, 1])
        assert addr.hexadecets == (0, 0, 0, 0, 0, 0, 0, 1)
        assert addr.grammar is None

    @pytest.mark.parametrize(
        "hexadecets",
        [(), (0,) * 7, (0,) * 9, (0,) * 7 + (0x10000,), (-1,) + (0,) * 7],
    )
    def test_invalid_hexadecets(self, hexadecets):
        with pytest.raises(ValueError):
            Address(hexadecets)

    def test_non_integer(self):
        with pytest.raises(ValueError):
            Address(("0",) * 8)

    def test_immutable(self):
        addr = parse("::1")
        with pytest.raises(AttributeError):
            addr.hexadecets = (0,) * 8

    def test_equality_ignores_grammar(self):
        assert parse("::ffff:1.2.3.4") == parse("0:0:0:0:0:ffff:102:304")
        assert parse("::1") == Address((0, 0, 0, 0, 0, 0, 0, 1))

    def test_hashable(self):
        assert len({parse("::1"), parse("0:0:0:0:0:0:0:1")}) == 1

    def test_int(self):
        assert int(parse("::1")) == 1
        assert int(parse("1::")) == 1 << 112
        assert int(parse("ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff")) == 2**128 - 1

    def test_grammar_recorded(self):
        assert parse("::1.2.3.4").grammar is Grammar.IPV4_COMPRESSED


class TestPrefixedAddress:
    def test_str(self):
        assert str(PrefixedAddress("2001:db8::", 32)) == "2001:db8::/32"
        assert str(PrefixedAddress("2001:db8::")) == "2001:db8::"

    def test_as_tuple(self):
        assert PrefixedAddress("::1", 0).as_tuple() == ("::1", 0)
