import json


def test_prefix_composed(invoke):
    res = invoke(["prefix", "2001:db8::/32"])
    assert res.exit_code == 0
    assert res.output.strip() == "2001:db8::/32"


def test_prefix_length_option(invoke):
    res = invoke(["prefix", "2001:db8::", "-l", "48"])
    assert res.exit_code == 0
    assert res.output.strip() == "2001:db8::/48"


def test_prefix_without_length(invoke):
    res = invoke(["prefix", "::1"])
    assert res.exit_code == 0
    assert res.output.strip() == "::1"


def test_prefix_json(invoke):
    res = invoke(["prefix", "2001:db8::1/64", "--json"])
    assert res.exit_code == 0
    assert json.loads(res.output) == {"address": "2001:db8::1", "prefix": 64}


def test_prefix_out_of_range(invoke):
    res = invoke(["prefix", "2001:db8::1/65"])
    assert res.exit_code == 1
    assert "must be 0-64" in res.output


def test_prefix_non_numeric(invoke):
    res = invoke(["prefix", "2001:db8::1/x"])
    assert res.exit_code == 1
    assert "non-numeric prefix length" in res.output
