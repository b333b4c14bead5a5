from __future__ import annotations

import pytest

from oci_reference.grammar import match_reference, reference_regexp

sha = "sha256:" + "a" * 64


def test_compiled_once():
    assert reference_regexp() is reference_regexp()


@pytest.mark.parametrize(
    "value, exp_groups",
    [
        ("busybox", ("busybox", None, None)),
        ("busybox:1.36", ("busybox", "1.36", None)),
        (f"busybox@{sha}", ("busybox", None, sha)),
        (f"busybox:1.36@{sha}", ("busybox", "1.36", sha)),
        ("test:5000/repo", ("test:5000/repo", None, None)),
        ("test.com:5000", ("test.com", "5000", None)),
        ("a__b.c-d---e/f_g", ("a__b.c-d---e/f_g", None, None)),
        ("Host-1.Example.com/x", ("Host-1.Example.com/x", None, None)),
        ("repo:_Tag.1-x", ("repo", "_Tag.1-x", None)),
        ("repo@multi+hash.v1:ABCdef0", ("repo", None, "multi+hash.v1:ABCdef0")),
        ("repo:" + "t" * 128, ("repo", "t" * 128, None)),
    ],
)
def test_match(value: str, exp_groups: tuple):
    assert match_reference(value) == exp_groups


@pytest.mark.parametrize(
    "value",
    [
        "",
        "Busybox",
        "busybox:",
        "busybox@",
        "busybox@sha256",
        "busybox@sha256:",
        "busybox@1sha:abc",
        "a___b",
        "a..b",
        "-host/repo",
        "host-/repo",
        "host:port/repo",
        "repo:" + "t" * 129,
        "repo\n",
        "repö",
    ],
)
def test_no_match(value: str):
    assert match_reference(value) is None


@pytest.mark.parametrize(
    "value",
    [
        "a" * 5000 + "!",
        "a-" * 2500 + "!",
        "a." * 2500 + "/!",
    ],
)
def test_no_match_long_input(value: str):
    assert match_reference(value) is None
