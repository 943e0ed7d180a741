"""Named image references, which may carry a tag and/or a digest."""

from __future__ import annotations

import json
import re

from .digest import EMPTY_DIGEST, Digest, parse_digest

__all__ = [
    "DOCKER_HUB_HOST",
    "EMPTY_NAME",
    "FULL_DOCKER_HUB_HOST",
    "NAME_TOTAL_LENGTH_MAX",
    "InvalidReferenceError",
    "Name",
    "parse_name",
]

DOCKER_HUB_HOST = "docker.io"
FULL_DOCKER_HUB_HOST = "index.docker.io"
OFFICIAL_REPO_NAME = "library"
NAME_TOTAL_LENGTH_MAX = 255

_ALPHA_NUMERIC = r"[a-z0-9]+"
_SEPARATOR = r"(?:[._]|__|-+)"
_NAME_COMPONENT = rf"{_ALPHA_NUMERIC}(?:{_SEPARATOR}{_ALPHA_NUMERIC})*"
_DOMAIN_COMPONENT = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?"
_DOMAIN = rf"{_DOMAIN_COMPONENT}(?:\.{_DOMAIN_COMPONENT})*(?::[0-9]+)?"
_TAG = r"[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}"
_DIGEST = r"[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9a-fA-F]{32,}"
_PATH = rf"{_NAME_COMPONENT}(?:/{_NAME_COMPONENT})*"
_NAME = rf"(?:{_DOMAIN}/)?{_PATH}"

_REFERENCE_RE = re.compile(rf"({_NAME})(?::({_TAG}))?(?:@({_DIGEST}))?")
_ANCHORED_NAME_RE = re.compile(rf"(?:({_DOMAIN})/)?({_PATH})")
_TAG_RE = re.compile(_TAG)
_DIGEST_RE = re.compile(_DIGEST)
_IDENTIFIER_RE = re.compile(r"[a-f0-9]{64}")


class InvalidReferenceError(ValueError):
    """Raised when an image reference, tag or digest cannot be used."""


class Name:
    """An image reference: repository, optional tag and optional digest."""

    __slots__ = ("_domain", "_path", "_tag", "_digest")

    def __init__(self, domain: str = "", path: str = "", tag: str = "",
                 digest: Digest = EMPTY_DIGEST) -> None:
        self._domain = domain
        self._path = path
        self._tag = tag
        self._digest = digest

    def _key(self) -> tuple[str, str, str, Digest]:
        return (self._domain, self._path, self._tag, self._digest)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"

    def _is_empty(self) -> bool:
        return not self._path

    def normalize(self) -> Name:
        """Return a fully-qualified equivalent of this name."""
        if self._is_empty():
            return EMPTY_NAME
        return parse_name(str(self))

    def name(self) -> str:
        """Return the repository name without any tag or digest."""
        if self._is_empty():
            raise InvalidReferenceError("empty image name")
        if self._domain:
            return f"{self._domain}/{self._path}"
        return self._path

    def __str__(self) -> str:
        if self._is_empty():
            return ""
        text = self.name()
        if self._tag:
            text += f":{self._tag}"
        if self._digest:
            text += f"@{self._digest}"
        return text

    def host(self) -> str:
        """Return the registry host of the name."""
        return self._host_path()[0]

    def path(self) -> str:
        """Return the repository path of the name, without the host."""
        return self._host_path()[1]

    def tag(self) -> str:
        """Return the tag, or an empty string if the name is untagged."""
        return self._tag

    def digest(self) -> Digest:
        """Return the digest, or EMPTY_DIGEST if the name has none."""
        return self._digest

    def with_tag(self, tag: str) -> Name:
        """Return a copy of this name carrying ``tag`` in place of any existing tag."""
        if not _TAG_RE.fullmatch(tag):
            raise InvalidReferenceError(
                f"Cannot apply tag {tag} to image.Name {self}: invalid tag format")
        domain, path = self._repository()
        return Name(domain, path, tag, self._digest)

    def without_tag_or_digest(self) -> Name:
        """Return a copy of this name with any tag and digest removed."""
        domain, path = _split_domain(self.name())
        return Name(domain, path)

    def with_digest(self, digest: Digest) -> Name:
        """Return a copy of this name carrying ``digest``, keeping any tag."""
        if not _DIGEST_RE.fullmatch(str(digest)):
            raise InvalidReferenceError(
                f"Cannot apply digest {digest} to image.Name {self}: invalid digest format")
        domain, path = self._repository()
        return Name(domain, path, self._tag, digest)

    def without_digest(self) -> Name:
        """Return a copy of this name with any digest removed, keeping any tag."""
        trimmed = self.without_tag_or_digest()
        if not self._tag:
            return trimmed
        return trimmed.with_tag(self._tag)

    def synonyms(self) -> list[Name]:
        """Return the names equivalent to this one, itself included.

        A synonym need not be normalized; in particular it may lack a host.
        """
        if self._is_empty():
            return [EMPTY_NAME]
        host, repo_path = self._host_path()
        names = [self]
        if host == DOCKER_HUB_HOST:
            candidates = [repo_path]
            elements = repo_path.split("/")
            if len(elements) == 2 and elements[0] == OFFICIAL_REPO_NAME:
                candidates.append(elements[1])
            candidates.append(f"{FULL_DOCKER_HUB_HOST}/{repo_path}")
            candidates.append(f"{DOCKER_HUB_HOST}/{repo_path}")
            for candidate in candidates:
                synonym = self._synonym(candidate)
                if synonym is not None and synonym not in names:
                    names.append(synonym)
        return names

    def _synonym(self, new_name: str) -> Name | None:
        repository = _with_name(new_name)
        if repository is None:
            return None
        domain, path = repository
        return Name(domain, path, self._tag, self._digest)

    def _repository(self) -> tuple[str, str]:
        if self._is_empty():
            raise InvalidReferenceError("empty image name")
        return self._domain, self._path

    def _host_path(self) -> tuple[str, str]:
        parts = self.name().split("/", 1)
        if len(parts) == 1:
            return self.normalize()._host_path()
        return parts[0], parts[1]


EMPTY_NAME = Name()


def _split_domain(name: str) -> tuple[str, str]:
    match = _ANCHORED_NAME_RE.fullmatch(name)
    if match is None:
        return "", name
    return match.group(1) or "", match.group(2)


def _with_name(name: str) -> tuple[str, str] | None:
    if len(name) > NAME_TOTAL_LENGTH_MAX:
        return None
    match = _ANCHORED_NAME_RE.fullmatch(name)
    if match is None:
        return None
    return match.group(1) or "", match.group(2)


def _split_docker_domain(name: str) -> tuple[str, str]:
    sep = name.find("/")
    if sep == -1 or (not any(c in name[:sep] for c in ".:") and name[:sep] != "localhost"):
        domain, remainder = DOCKER_HUB_HOST, name
    else:
        domain, remainder = name[:sep], name[sep + 1:]
    if domain == FULL_DOCKER_HUB_HOST:
        domain = DOCKER_HUB_HOST
    if domain == DOCKER_HUB_HOST and "/" not in remainder:
        remainder = f"{OFFICIAL_REPO_NAME}/{remainder}"
    return domain, remainder


def _parse_normalized(reference: str) -> Name:
    if _IDENTIFIER_RE.fullmatch(reference):
        raise ValueError("cannot specify 64-byte hexadecimal strings")
    domain, remainder = _split_docker_domain(reference)
    remote_name = remainder.split(":", 1)[0]
    if remote_name.lower() != remote_name:
        raise ValueError("repository name must be lowercase")

    match = _REFERENCE_RE.fullmatch(f"{domain}/{remainder}")
    if match is None:
        raise ValueError("invalid reference format")
    repo_name, tag, digest_text = match.groups()
    if len(repo_name) > NAME_TOTAL_LENGTH_MAX:
        raise ValueError(f"repository name must not be more than {NAME_TOTAL_LENGTH_MAX} characters")

    repo_domain, repo_path = _split_domain(repo_name)
    digest = parse_digest(digest_text) if digest_text else EMPTY_DIGEST
    return Name(repo_domain, repo_path, tag or "", digest)


def parse_name(reference: str) -> Name:
    """Parse and normalize an image reference, raising InvalidReferenceError if invalid."""
    try:
        return _parse_normalized(reference)
    except ValueError as exc:
        quoted = json.dumps(reference, ensure_ascii=False)
        raise InvalidReferenceError(f"invalid image reference: {quoted}") from exc