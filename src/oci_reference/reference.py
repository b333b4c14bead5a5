from __future__ import annotations

import logging
import pathlib
from dataclasses import dataclass

from pathvalidate import sanitize_filename

from oci_reference.digest import DIGEST_HEXLEN, Digest
from oci_reference.errors import (
    NAME_TOTAL_LENGTH_MAX,
    DigestError,
    DigestInvalidFormatError,
    DigestInvalidLengthError,
    DigestUnsupportedError,
    NameEmptyError,
    NameTooLongError,
    ReferenceInvalidFormatError,
)
from oci_reference.grammar import match_reference

DOCKER_HUB_DOMAIN_LEGACY = "index.docker.io"
DOCKER_HUB_DOMAIN = "docker.io"
DOCKER_HUB_OFFICIAL_REPO_NAME = "library"
DEFAULT_TAG = "latest"

logger = logging.getLogger("oci-reference")


def split_domain(name: str) -> tuple[str, str]:
    """(registry, repository) from an already-validated name

    Defaults to Docker Hub when the first path segment doesn't look like a host
    (no `.`, no `:` and not `localhost`), folds the legacy Hub domain and adds
    the official-images namespace to single-segment Hub repositories.

    Mirrors distribution/reference's splitDockerDomain"""
    left, sep, right = name.partition("/")
    if not sep or (("." not in left and ":" not in left) and left != "localhost"):
        domain, remainder = DOCKER_HUB_DOMAIN, name
    else:
        domain, remainder = left, right

    if domain == DOCKER_HUB_DOMAIN_LEGACY:
        logger.debug(f"folding legacy domain {domain} into {DOCKER_HUB_DOMAIN}")
        domain = DOCKER_HUB_DOMAIN
    if domain == DOCKER_HUB_DOMAIN and "/" not in remainder:
        remainder = f"{DOCKER_HUB_OFFICIAL_REPO_NAME}/{remainder}"

    return domain, remainder


def check_digest(reference: str, digest: str):
    """ensure a reference-embedded digest is a well-formed sha256/384/512 one"""
    algorithm, sep, encoded = digest.partition(":")
    if not sep:
        raise DigestInvalidFormatError(reference)
    expected = DIGEST_HEXLEN.get(algorithm)
    if expected is None:
        raise DigestUnsupportedError(reference)
    if len(encoded) != expected:
        raise DigestInvalidLengthError(reference)
    try:
        Digest.parse(digest)
    except DigestError as exc:
        raise DigestInvalidFormatError(reference) from exc


@dataclass
class Reference:
    """A named, located image: `registry/repository[:tag][@digest]`

    Only `mirror_registry` changes after construction."""

    registry: str
    repository: str
    tag: str | None = None
    digest: str | None = None
    mirror_registry: str | None = None

    def __str__(self) -> str:
        return self.whole()

    @classmethod
    def with_tag(cls, registry: str, repository: str, tag: str) -> Reference:
        return cls(registry=registry, repository=repository, tag=tag)

    @classmethod
    def with_digest(cls, registry: str, repository: str, digest: str) -> Reference:
        return cls(registry=registry, repository=repository, digest=digest)

    @classmethod
    def parse(cls, value: str) -> Reference:
        if not value:
            raise NameEmptyError(value)

        groups = match_reference(value)
        if groups is None:
            logger.debug(f"rejecting {value!r}: no grammar match")
            raise ReferenceInvalidFormatError(value)
        name, tag, digest = groups

        # default tag if none requested
        if tag is None and digest is None:
            tag = DEFAULT_TAG

        registry, repository = split_domain(name)
        if len(repository) > NAME_TOTAL_LENGTH_MAX:
            raise NameTooLongError(value)

        # sha digests are hex: two characters per byte of hash
        if digest is not None:
            check_digest(value, digest)

        logger.debug(f"{value!r} resolved to {registry=} {repository=}")
        return cls(registry=registry, repository=repository, tag=tag, digest=digest)

    def clone_with_digest(self, digest: str) -> Reference:
        """Same image pinned to `digest`; the tag is dropped"""
        return Reference(
            registry=self.registry,
            repository=self.repository,
            tag=None,
            digest=digest,
            mirror_registry=self.mirror_registry,
        )

    def set_mirror_registry(self, registry: str):
        """Pull through `registry` instead

        The original registry stays available via `namespace`, for mirrors
        that expect it in an `ns` query parameter."""
        self.mirror_registry = registry

    def resolve_registry(self) -> str:
        """Network address of the registry

        The mirror when set. docker.io is served from index.docker.io"""
        if self.mirror_registry is not None:
            return self.mirror_registry
        if self.registry == DOCKER_HUB_DOMAIN:
            return DOCKER_HUB_DOMAIN_LEGACY
        return self.registry

    @property
    def namespace(self) -> str | None:
        """original registry when pulled via a mirror"""
        if self.mirror_registry is not None:
            return self.registry
        return None

    @property
    def fullname(self) -> str:
        if not self.registry:
            return self.repository
        return f"{self.registry}/{self.repository}"

    @property
    def reference(self) -> str | None:
        return self.digest or self.tag

    @property
    def fs_name(self) -> str:
        return sanitize_filename(
            "_".join(pathlib.PurePosixPath(self.fullname).parts)
            + f"_{self.reference or ''}"
        )

    def whole(self) -> str:
        value = self.fullname
        if self.tag is not None:
            if value:
                value += ":"
            value += self.tag
        if self.digest is not None:
            if value:
                value += "@"
            value += self.digest
        return value
