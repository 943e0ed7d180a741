"""Immutable sets of image references."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator

from .name import Name, parse_name

__all__ = ["EMPTY", "ImageSet"]


class ImageSet:
    """An immutable collection of image references without duplicates."""

    __slots__ = ("_names",)

    def __init__(self, refs: Iterable[str] = ()) -> None:
        self._names: frozenset[Name] = frozenset(parse_name(ref) for ref in refs)

    @classmethod
    def _of_names(cls, names: Iterable[Name]) -> ImageSet:
        result = cls()
        result._names = frozenset(names)
        return result

    def union(self, other: ImageSet) -> ImageSet:
        """Return the union of this set with ``other``."""
        return self._of_names(self._names | other._names)

    def __iter__(self) -> Iterator[Name]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageSet):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"ImageSet({self.strings()!r})"

    def strings(self) -> list[str]:
        """Return the image references as a sorted list of strings."""
        return sorted(str(name) for name in self._names)

    def __str__(self) -> str:
        return f"[{', '.join(self.strings())}]"

    def to_json(self) -> str:
        """Encode the set as a JSON array of image references (``null`` if empty)."""
        strings = self.strings()
        if not strings:
            return "null"
        return json.dumps(strings, separators=(",", ":"))

    @classmethod
    def from_json(cls, data: str | bytes) -> ImageSet:
        """Decode a JSON array of image references, or ``null``, into a set."""
        value = json.loads(data)
        if value is None:
            return EMPTY
        if not isinstance(value, list):
            raise ValueError(f"unmarshalled data not a slice: {value}")
        for ref in value:
            if not isinstance(ref, str):
                raise ValueError(
                    f"unmarshalled slice contains a value which is not a string: {ref}")
        return cls(value)


EMPTY = ImageSet()