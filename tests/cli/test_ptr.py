def test_ptr(invoke):
    res = invoke(["ptr", "2001:db8::1"])
    assert res.exit_code == 0
    nibbles = "1000" + "0" * 20 + "8bd01002"
    assert res.output.strip() == ".".join(nibbles) + ".ip6.int."


def test_ptr_invalid(invoke):
    res = invoke(["ptr", "not:an:address"])
    assert res.exit_code == 1
    assert "Error:" in res.output
