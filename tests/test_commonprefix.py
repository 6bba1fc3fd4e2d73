import pytest

from menucli.commonprefix import common_prefix


def test_single_string_is_its_own_prefix():
    assert common_prefix(["hello"]) == "hello"


def test_shared_prefix():
    assert common_prefix(["hello", "hello_everysession"]) == "hello"


def test_no_shared_prefix():
    assert common_prefix(["color", "nocolor"]) == ""


def test_empty_string_member():
    assert common_prefix(["", "abc"]) == ""


def test_identical_strings():
    assert common_prefix(["sub", "sub", "sub"]) == "sub"


def test_accepts_any_iterable():
    assert common_prefix(iter(["subsub", "sub"])) == "sub"


def test_empty_input_raises():
    with pytest.raises(ValueError):
        common_prefix([])


@pytest.mark.parametrize(
    "strings",
    [["answer", "add", "abc"], ["help", "hello", "helium"], ["x", "y"]],
)
def test_prefix_invariants(strings):
    prefix = common_prefix(strings)
    assert all(s.startswith(prefix) for s in strings)
    shortest = min(strings, key=len)
    if len(prefix) < len(shortest):
        nxt = {s[len(prefix)] for s in strings}
        assert len(nxt) > 1