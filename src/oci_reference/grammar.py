"""Image reference grammar

    reference        := name [ ":" tag ] [ "@" digest ]
    name             := [domain "/"] path-component ["/" path-component]*
    domain           := domain-component ["." domain-component]* [":" port-number]
    domain-component := /([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])/
    port-number      := /[0-9]+/
    path-component   := alpha-numeric [separator alpha-numeric]*
    alpha-numeric    := /[a-z0-9]+/
    separator        := /[_.]|__|[-]+/
    tag              := /[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}/
    digest           := digest-algorithm ":" digest-hex
    digest-algorithm := digest-algorithm-component [digest-algorithm-separator
                        digest-algorithm-component]*
    digest-algorithm-separator := /[+._-]/
    digest-algorithm-component := /[A-Za-z][A-Za-z0-9]*/
    digest-hex       := /[0-9a-fA-F]+/

Follows github.com/distribution/reference, without its 32 character minimum on
digest-hex. Character classes are spelled out so `re` never widens them to
unicode."""

from __future__ import annotations

import functools
import re

# separator never matches empty, or `re` backtracks exponentially on
# long alpha-numeric runs
ALPHA_NUMERIC = r"[a-z0-9]+"
SEPARATOR = r"(?:[._]|__|[-]+)"
DOMAIN_COMPONENT = r"(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])"
PORT_NUMBER = r"[0-9]+"
TAG = r"[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}"
DIGEST_ALGORITHM_COMPONENT = r"[A-Za-z][A-Za-z0-9]*"
DIGEST_ALGORITHM_SEPARATOR = r"[-_+.]"
DIGEST_HEX = r"[0-9a-fA-F]+"


def literal(value: str) -> str:
    return re.escape(value)


def expression(*parts: str) -> str:
    return "".join(parts)


def group(*parts: str) -> str:
    return f"(?:{expression(*parts)})"


def optional(*parts: str) -> str:
    return f"{group(*parts)}?"


def repeated(*parts: str) -> str:
    return f"{group(*parts)}*"


def capture(*parts: str) -> str:
    return f"({expression(*parts)})"


PATH_COMPONENT = expression(ALPHA_NUMERIC, repeated(SEPARATOR, ALPHA_NUMERIC))
DOMAIN = expression(
    DOMAIN_COMPONENT,
    repeated(literal("."), DOMAIN_COMPONENT),
    optional(literal(":"), PORT_NUMBER),
)
NAME = expression(
    optional(DOMAIN, literal("/")),
    PATH_COMPONENT,
    repeated(literal("/"), PATH_COMPONENT),
)
DIGEST = expression(
    DIGEST_ALGORITHM_COMPONENT,
    repeated(DIGEST_ALGORITHM_SEPARATOR, DIGEST_ALGORITHM_COMPONENT),
    literal(":"),
    DIGEST_HEX,
)
REFERENCE = expression(
    capture(NAME),
    optional(literal(":"), capture(TAG)),
    optional(literal("@"), capture(DIGEST)),
)


@functools.lru_cache(maxsize=None)
def reference_regexp() -> re.Pattern[str]:
    """compiled REFERENCE, built on first use and shared afterwards"""
    return re.compile(REFERENCE)


def match_reference(value: str) -> tuple[str, str | None, str | None] | None:
    """(name, tag, digest) groups of a whole-string match, None otherwise"""
    match = reference_regexp().fullmatch(value)
    if match is None:
        return None
    name, tag, digest = match.groups()
    return name, tag, digest
