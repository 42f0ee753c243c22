"""Unit tests for grammar recognition and classification."""

import pytest

from ipv6addr import InvalidAddressError, classify
from ipv6addr.addressing import Grammar, build_grammar_table
from ipv6addr.addressing.grammars import (
    COMPRESSED,
    IPV4,
    IPV4_COMPRESSED,
    PREFERRED,
)


class TestGrammarTable:
    """Test the ordered grammar table."""

    def test_order_without_base85(self):
        table = build_grammar_table(base85=False)
        assert [rule.grammar for rule in table] == [
            Grammar.PREFERRED,
            Grammar.COMPRESSED,
            Grammar.IPV4,
            Grammar.IPV4_COMPRESSED,
        ]

    def test_base85_registered_last(self, with_base85):
        table = build_grammar_table(base85=True)
        assert table[-1].grammar is Grammar.BASE85
        assert len(table) == 5

    def test_table_is_memoised(self):
        assert build_grammar_table(base85=False) is build_grammar_table(
            base85=False
        )

    def test_rule_names(self):
        assert IPV4_COMPRESSED.name == "ipv4-compressed"
        assert PREFERRED.name == "preferred"


class TestClassify:
    """Test which grammar an address string falls under."""

    @pytest.mark.parametrize(
        "text, grammar",
        [
            ("1:2:3:4:5:6:7:8", Grammar.PREFERRED),
            ("DEAD:beef:0:0:0:0:0:F0AD", Grammar.PREFERRED),
            ("::", Grammar.COMPRESSED),
            ("::1", Grammar.COMPRESSED),
            ("1::", Grammar.COMPRESSED),
            ("fe80::", Grammar.COMPRESSED),
            ("1:2:3:4:5:6::", Grammar.COMPRESSED),
            ("::2:3:4:5:6:7", Grammar.COMPRESSED),
            ("1::8", Grammar.COMPRESSED),
            ("1:2:3:4:5:6::8", Grammar.COMPRESSED),
            ("1::3:4:5:6:7:8", Grammar.COMPRESSED),
            ("0:0:0:0:0:ffff:192.168.1.1", Grammar.IPV4),
            ("0:0:0:0:0:FFFF:192.168.1.1", Grammar.IPV4),
            ("0:0:0:0:0:0:10.0.0.1", Grammar.IPV4),
            ("::10.0.0.1", Grammar.IPV4_COMPRESSED),
            ("::ffff:10.0.0.1", Grammar.IPV4_COMPRESSED),
            ("::FFFF:10.0.0.1", Grammar.IPV4_COMPRESSED),
        ],
    )
    def test_classify(self, text, grammar, without_base85):
        assert classify(text, without_base85).grammar is grammar

    def test_surrounding_whitespace_ignored(self, without_base85):
        assert classify("  ::1\n", without_base85).grammar is Grammar.COMPRESSED

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "not:an:address",
            "12345::1",
            "1:2:3:4:5:6:7",
            "1:2:3:4:5:6:7:8:9",
            "1::2::3",
            ":::",
            "1:2:3:4:5:6:7::",
            "::2:3:4:5:6:7:8",
            "g::1",
            "::1/64",
            "0:0:0:0:1:ffff:1.2.3.4",
            "::ffff:1.2.3",
            "::1:1.2.3.4",
            "fe80::1%eth0",
        ],
    )
    def test_invalid(self, text, without_base85):
        with pytest.raises(InvalidAddressError):
            classify(text, without_base85)

    def test_non_string(self):
        with pytest.raises(InvalidAddressError):
            classify(None)


class TestRuleDecode:
    """Test that each rule only decodes its own grammar."""

    def test_rule_rejects_foreign_text(self):
        with pytest.raises(InvalidAddressError, match="invalid preferred"):
            PREFERRED.decode("::1")

    def test_compressed_rejects_preferred(self):
        with pytest.raises(InvalidAddressError):
            COMPRESSED.decode("1:2:3:4:5:6:7:8")

    def test_ipv4_decoder(self):
        assert IPV4.decode("0:0:0:0:0:ffff:1.2.3.4") == [
            0, 0, 0, 0, 0, 0xFFFF, 0x0102, 0x0304,
        ]

    def test_ipv4_compressed_decoder(self):
        assert IPV4_COMPRESSED.decode("::1.2.3.4") == [
            0, 0, 0, 0, 0, 0, 0x0102, 0x0304,
        ]

    def test_octet_out_of_range(self):
        with pytest.raises(InvalidAddressError, match="IPv4"):
            IPV4_COMPRESSED.decode("::ffff:1.2.3.256")
