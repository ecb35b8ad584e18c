"""Key/value metadata attached to an image, kept in key order."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class Metadata:
    """A sorted string-to-string mapping with the text forms used by the viewer and the file format."""

    def __init__(self, items: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(items or {})

    def add(self, key: str, value: str) -> None:
        """Insert an entry unless the key is already present."""
        self._entries.setdefault(key, value)

    def set(self, key: str, value: str) -> None:
        """Insert an entry, replacing any existing value."""
        self._entries[key] = value

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Metadata({dict(self.items())!r})"

    def items(self) -> list[tuple[str, str]]:
        """Return the entries as pairs, sorted by key."""
        return [(key, self._entries[key]) for key in self]

    def copy(self) -> Metadata:
        """Return an independent copy."""
        return Metadata(self._entries)

    def display(self) -> str:
        """Return one ``key: value`` line per entry."""
        return "\n".join(f"{key}: {value}" for key, value in self.items())

    def serialize(self) -> str:
        """Return the entries as ``key:value`` pairs joined by semicolons."""
        return ";".join(f"{key}:{value}" for key, value in self.items())


def parse_display_text(text: str) -> Metadata:
    """Build metadata from ``key: value`` lines; later lines replace earlier ones."""
    metadata = Metadata()
    for line in text.split("\n"):
        parts = line.split(": ")
        metadata.set(parts[0], parts[-1])
    return metadata


def parse_serialized(text: str) -> Metadata:
    """Build metadata from ``key:value`` pairs joined by semicolons; the first of duplicate keys wins."""
    metadata = Metadata()
    for entry in text.split(";"):
        parts = entry.split(":")
        metadata.add(parts[0], parts[-1])
    return metadata