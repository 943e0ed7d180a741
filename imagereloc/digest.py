"""Content-addressable digests of image manifests and manifest lists."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["EMPTY_DIGEST", "Digest", "InvalidDigestError", "parse_digest"]

# Number of bytes produced by each supported hash algorithm.
_ALGORITHM_SIZES = {
    "sha256": 32,
    "sha384": 48,
    "sha512": 64,
}

_ANCHORED_DIGEST_RE = re.compile(r"[a-z0-9]+(?:[.+_-][a-z0-9]+)*:[a-zA-Z0-9=_-]+")
_ENCODED_RE = re.compile(r"[a-f0-9]+")


class InvalidDigestError(ValueError):
    """Raised when a digest string is malformed or uses an unsupported algorithm."""


@dataclass(frozen=True)
class Digest:
    """A CAS address of an image, of the form ``algorithm:hex``."""

    value: str = ""

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)


EMPTY_DIGEST = Digest("")


def parse_digest(value: str) -> Digest:
    """Return the Digest for ``value``, raising InvalidDigestError if it is invalid."""
    sep = value.find(":")
    if sep <= 0 or sep + 1 == len(value):
        raise InvalidDigestError("invalid checksum digest format")

    algorithm, encoded = value[:sep], value[sep + 1:]
    size = _ALGORITHM_SIZES.get(algorithm)
    if size is None:
        if not _ANCHORED_DIGEST_RE.fullmatch(value):
            raise InvalidDigestError("invalid checksum digest format")
        raise InvalidDigestError("unsupported digest algorithm")

    if len(encoded) != size * 2:
        raise InvalidDigestError("invalid checksum digest length")
    if not _ENCODED_RE.fullmatch(encoded):
        raise InvalidDigestError("invalid checksum digest format")
    return Digest(value)