from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar

from oci_reference.chars import is_algorithm_component, is_encoded, is_lowercase_hex
from oci_reference.errors import (
    AlgorithmMismatchError,
    DigestError,
    InvalidAlgorithmError,
    InvalidDigestLengthError,
    InvalidEncodedValueError,
    MissingSeparatorError,
    NonHexDigestError,
)

ALGORITHM_SEPARATOR = re.compile(r"[+._-]")

# hex-encoded length of each known hash family
DIGEST_HEXLEN: dict[str, int] = {
    "sha256": 64,
    "sha384": 96,
    "sha512": 128,
}


@dataclass(frozen=True)
class DigestAlgorithm:
    """Hash family of a digest

    sha256, sha384 and sha512 are known families with a fixed hex length.
    Any other name is kept verbatim."""

    name: str

    SHA256: ClassVar[DigestAlgorithm]
    SHA384: ClassVar[DigestAlgorithm]
    SHA512: ClassVar[DigestAlgorithm]

    def __str__(self) -> str:
        return self.name

    @property
    def digest_hexlen(self) -> int | None:
        """length of the encoded value in hex characters, for known families"""
        return DIGEST_HEXLEN.get(self.name)

    @property
    def is_known(self) -> bool:
        return self.name in DIGEST_HEXLEN

    @classmethod
    def from_str(cls, value: str) -> DigestAlgorithm:
        return cls(name=value)


DigestAlgorithm.SHA256 = DigestAlgorithm("sha256")
DigestAlgorithm.SHA384 = DigestAlgorithm("sha384")
DigestAlgorithm.SHA512 = DigestAlgorithm("sha512")


def split_algorithm(algorithm: str) -> list[str]:
    """algorithm components, split on any of the algorithm separators"""
    return ALGORITHM_SEPARATOR.split(algorithm)


@dataclass(frozen=True)
class Digest:
    """A parsed `algorithm:encoded` pair

    `value` is the complete digest text and `split` the offset of its colon;
    both halves are sliced from it on access."""

    algorithm: DigestAlgorithm
    value: str
    split: int

    def __str__(self) -> str:
        return self.value

    @property
    def encoded(self) -> str:
        """encoded part of the digest

        For known hash families, this is guaranteed to be lowercase hex
        of the family's length (64 for sha256)"""
        return self.value[self.split + 1 :]

    @classmethod
    def parse(cls, digest_str: str) -> Digest:
        split = digest_str.find(":")
        if split < 0:
            raise MissingSeparatorError(digest_str)
        algorithm_str, value = digest_str[:split], digest_str[split + 1 :]

        # algorithm ::= algorithm-component (algorithm-separator algorithm-component)*
        for component in split_algorithm(algorithm_str):
            if not component or not all(
                is_algorithm_component(char) for char in component
            ):
                raise InvalidAlgorithmError(digest_str, component)

        if not value or not all(is_encoded(char) for char in value):
            raise InvalidEncodedValueError(digest_str, value)

        algorithm = DigestAlgorithm.from_str(algorithm_str)
        expected = algorithm.digest_hexlen
        if expected is not None:
            if len(value) != expected:
                raise InvalidDigestLengthError(digest_str, expected, len(value))
            if not all(is_lowercase_hex(char) for char in value):
                raise NonHexDigestError(digest_str, value)

        return cls(algorithm=algorithm, value=digest_str, split=split)

    @classmethod
    def from_descriptor(cls, descriptor: dict[str, Any]) -> Digest:
        """Digest of a manifest/layer/config descriptor payload"""
        try:
            digest_str = descriptor["digest"]
        except KeyError as exc:
            raise DigestError("", "descriptor has no digest") from exc
        if not isinstance(digest_str, str):
            raise DigestError(str(digest_str), "descriptor digest is not a string")
        return cls.parse(digest_str)

    def to_sha256(self) -> Sha256Digest:
        if self.algorithm != DigestAlgorithm.SHA256:
            raise AlgorithmMismatchError(
                self.value, str(DigestAlgorithm.SHA256), str(self.algorithm)
            )
        return Sha256Digest(encoded=self.encoded)


@dataclass(frozen=True)
class Sha256Digest:
    """A SHA-256 digest: exactly 64 lowercase hex characters"""

    encoded: str

    def __str__(self) -> str:
        return self.encoded

    @classmethod
    def parse(cls, encoded: str) -> Sha256Digest:
        return Digest.parse(f"{DigestAlgorithm.SHA256}:{encoded}").to_sha256()

    def to_digest(self) -> Digest:
        algorithm = DigestAlgorithm.SHA256
        return Digest(
            algorithm=algorithm,
            value=f"{algorithm}:{self.encoded}",
            split=len(algorithm.name),
        )
