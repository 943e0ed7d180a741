"""Mapping of image names to repositories under a new prefix."""

from __future__ import annotations

import hashlib
from collections.abc import Callable

from .name import NAME_TOTAL_LENGTH_MAX, Name, parse_name

__all__ = [
    "PathMapping",
    "flatten_repo_path",
    "flatten_repo_path_preserve_tag_digest",
]

PathMapping = Callable[[str, Name], Name]


def _mapped_path(repo_prefix: str, repo_path: str, digest_hex: str) -> str:
    return f"{repo_prefix}/{repo_path}-{digest_hex}"


def _reduce(components: list[str], n: int) -> list[str]:
    if len(components) < 2 or len(components) <= n:
        return components
    last = components[-1]
    if n < 2:
        return [last]
    return [*components[:n - 1], "-", last]


def _crunch(components: list[str], size: int) -> list[str]:
    for n in range(len(components), 0, -1):
        reduced = _reduce(components, n)
        if len("-".join(reduced)) <= size:
            return reduced
    if components and len(components[0]) <= size:
        return [components[0]]
    return []


def _flat_path(repo_path: str, size: int) -> str:
    return "-".join(_crunch(repo_path.split("/"), size))


def flatten_repo_path(repo_prefix: str, original: Name) -> Name:
    """Map ``original`` to a name under ``repo_prefix``.

    The result avoids collisions between repositories by including a hash of the
    original name, and keeps as much of the original path as fits.
    """
    digest_hex = hashlib.md5(original.name().encode()).hexdigest()
    available = NAME_TOTAL_LENGTH_MAX - len(_mapped_path(repo_prefix, "", digest_hex))
    flat = _flat_path(original.path(), available)
    if flat:
        mapped = _mapped_path(repo_prefix, flat, digest_hex)
    else:
        mapped = f"{repo_prefix}/{digest_hex}"
    return parse_name(mapped)


def flatten_repo_path_preserve_tag_digest(repo_prefix: str, original: Name) -> Name:
    """Like flatten_repo_path, but keep any tag and digest of ``original``."""
    mapped = flatten_repo_path(repo_prefix, original)
    if tag := original.tag():
        mapped = mapped.with_tag(tag)
    if digest := original.digest():
        mapped = mapped.with_digest(digest)
    return mapped