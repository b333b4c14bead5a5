"""Single-character classes of the OCI digest grammar

    algorithm-component ::= [a-z0-9]+
    encoded             ::= [a-zA-Z0-9=_-]+

See https://github.com/opencontainers/image-spec/blob/main/descriptor.md#digests"""

from __future__ import annotations

LOWER_HEX = frozenset("0123456789abcdef")
ALGORITHM_COMPONENT = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")
ENCODED = ALGORITHM_COMPONENT | frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ=_-")


def is_lowercase_hex(char: str) -> bool:
    return char in LOWER_HEX


def is_algorithm_component(char: str) -> bool:
    return char in ALGORITHM_COMPONENT


def is_encoded(char: str) -> bool:
    return char in ENCODED
