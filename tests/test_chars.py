from __future__ import annotations

import string

import pytest

from oci_reference.chars import is_algorithm_component, is_encoded, is_lowercase_hex


@pytest.mark.parametrize("char", list("0123456789abcdef"))
def test_lowercase_hex(char: str):
    assert is_lowercase_hex(char)
    assert is_algorithm_component(char)
    assert is_encoded(char)


@pytest.mark.parametrize("char", list("ABCDEFgz:+ "))
def test_not_lowercase_hex(char: str):
    assert not is_lowercase_hex(char)


def test_algorithm_component():
    for char in string.ascii_lowercase + string.digits:
        assert is_algorithm_component(char)
    for char in string.ascii_uppercase + "+._-:=/@ é":
        assert not is_algorithm_component(char)


def test_encoded():
    for char in string.ascii_letters + string.digits + "=_-":
        assert is_encoded(char)
    for char in "+.:/@ é*":
        assert not is_encoded(char)
