from __future__ import annotations

import logging

from oci_reference.digest import Digest, DigestAlgorithm, Sha256Digest
from oci_reference.errors import (
    AlgorithmMismatchError,
    DigestError,
    DigestInvalidFormatError,
    DigestInvalidLengthError,
    DigestUnsupportedError,
    InvalidAlgorithmError,
    InvalidDigestLengthError,
    InvalidEncodedValueError,
    MissingSeparatorError,
    NameContainsUppercaseError,
    NameEmptyError,
    NameTooLongError,
    NonHexDigestError,
    ReferenceInvalidFormatError,
    ReferenceParseError,
    TagInvalidFormatError,
)
from oci_reference.reference import Reference, split_domain

__version__ = "1.0.0"
logger = logging.getLogger("oci-reference")

__all__ = [
    "AlgorithmMismatchError",
    "Digest",
    "DigestAlgorithm",
    "DigestError",
    "DigestInvalidFormatError",
    "DigestInvalidLengthError",
    "DigestUnsupportedError",
    "InvalidAlgorithmError",
    "InvalidDigestLengthError",
    "InvalidEncodedValueError",
    "MissingSeparatorError",
    "NameContainsUppercaseError",
    "NameEmptyError",
    "NameTooLongError",
    "NonHexDigestError",
    "Reference",
    "ReferenceInvalidFormatError",
    "ReferenceParseError",
    "Sha256Digest",
    "TagInvalidFormatError",
    "split_domain",
]
