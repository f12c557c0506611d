"""Registry that hands out numeric identifiers for keys."""

from __future__ import annotations

from collections.abc import Iterator

from .utility import are_equal_strings


class KeyList:
    """Ordered collection of keys, each with a unique id starting at 1."""

    def __init__(self) -> None:
        self._keys: dict[int, str] = {}
        self._next_id = 1

    def add(self, key: str) -> int:
        """Store *key* and return the id assigned to it."""
        key_id = self._next_id
        self._next_id += 1
        self._keys[key_id] = key
        return key_id

    def get_key(self, key_id: int) -> str:
        """Return the key stored under *key_id*."""
        try:
            return self._keys[key_id]
        except KeyError:
            raise KeyError(f"no key with id {key_id}") from None

    def get_id(self, key: str) -> int:
        """Return the id of the first stored key equal to *key*."""
        for key_id, stored in self._keys.items():
            if are_equal_strings(stored, key):
                return key_id
        raise KeyError(f"key {key!r} is not in the list")

    def delete(self, key_id: int) -> None:
        """Remove the key stored under *key_id*."""
        try:
            del self._keys[key_id]
        except KeyError:
            raise KeyError(f"no key with id {key_id}") from None

    def display(self) -> None:
        """Print every stored key with its id."""
        lines = ["", "KEY in KEYLIST ::"]
        lines.extend(f"KID :: {key_id}\tKEY :: {key}" for key_id, key in self._keys.items())
        print("\n".join(lines))

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        yield from self._keys.items()