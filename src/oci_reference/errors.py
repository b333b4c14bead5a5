"""Rejection reasons for references and digests

Both families subclass ValueError so callers may catch either the family base
or ValueError itself."""

from __future__ import annotations

NAME_TOTAL_LENGTH_MAX = 255


class ReferenceParseError(ValueError):
    message = "invalid reference"

    def __init__(self, reference: str = ""):
        self.reference = reference
        super().__init__(self.message)


class DigestInvalidFormatError(ReferenceParseError):
    message = "invalid checksum digest format"


class DigestInvalidLengthError(ReferenceParseError):
    message = "invalid checksum digest length"


class DigestUnsupportedError(ReferenceParseError):
    message = "unsupported digest algorithm"


class NameContainsUppercaseError(ReferenceParseError):
    message = "repository name must be lowercase"


class NameEmptyError(ReferenceParseError):
    message = "repository name must have at least one component"


class NameTooLongError(ReferenceParseError):
    message = (
        f"repository name must not be more than {NAME_TOTAL_LENGTH_MAX} characters"
    )


class ReferenceInvalidFormatError(ReferenceParseError):
    message = "invalid reference format"


class TagInvalidFormatError(ReferenceParseError):
    message = "invalid tag format"


class DigestError(ValueError):
    def __init__(self, digest: str, message: str):
        self.digest = digest
        super().__init__(message)


class MissingSeparatorError(DigestError):
    def __init__(self, digest: str):
        super().__init__(digest, "missing ':' in digest")


class InvalidAlgorithmError(DigestError):
    def __init__(self, digest: str, component: str):
        self.component = component
        if component:
            message = f"Invalid algorithm component: {component}"
        else:
            message = "Empty algorithm component"
        super().__init__(digest, message)


class InvalidEncodedValueError(DigestError):
    def __init__(self, digest: str, value: str):
        self.value = value
        if value:
            message = f"Invalid encoded value {value}"
        else:
            message = "Empty algorithm value"
        super().__init__(digest, message)


class InvalidDigestLengthError(DigestError):
    def __init__(self, digest: str, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            digest, f"Invalid digest length {found} expected {expected}"
        )


class NonHexDigestError(DigestError):
    def __init__(self, digest: str, value: str):
        self.value = value
        super().__init__(
            digest, f"Invalid non-hexadecimal character in digest: {value}"
        )


class AlgorithmMismatchError(DigestError):
    def __init__(self, digest: str, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(digest, f"Expected algorithm {expected} but found {found}")
