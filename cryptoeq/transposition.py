"""Rail fence and row-column transposition ciphers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain, cycle, islice

from .keylist import KeyList
from .utility import key_order


def _rail_pattern(length: int, depth: int) -> list[int]:
    if not isinstance(depth, int) or depth < 1:
        raise ValueError(f"depth must be a positive integer, got {depth!r}")
    zigzag = list(range(depth)) + list(range(depth - 2, 0, -1))
    return list(islice(cycle(zigzag), length))


def rail_fence_encrypt(message: str, depth: int) -> str:
    """Write *message* in a zigzag over *depth* rails and read rail by rail."""
    rails: list[list[str]] = [[] for _ in range(depth if depth > 0 else 0)]
    pattern = _rail_pattern(len(message), depth)
    for char, rail in zip(message, pattern):
        rails[rail].append(char)
    return "".join(chain.from_iterable(rails))


def rail_fence_decrypt(ciphertext: str, depth: int) -> str:
    """Undo :func:`rail_fence_encrypt`."""
    pattern = _rail_pattern(len(ciphertext), depth)
    order = sorted(range(len(ciphertext)), key=lambda pos: (pattern[pos], pos))
    plain = [""] * len(ciphertext)
    for position, char in zip(order, ciphertext):
        plain[position] = char
    return "".join(plain)


def _checked_key(key: Sequence[int]) -> list[int]:
    key = list(key)
    if not key:
        raise ValueError("key must not be empty")
    if sorted(key) != list(range(1, len(key) + 1)):
        raise ValueError("key must be a permutation of 1..n")
    return key


def row_column_encrypt(message: str, key: Sequence[int]) -> str:
    """Encrypt with a row-column transposition.

    The message is written row by row under the key, padded with spaces
    to fill the last row; column *i* is emitted in position ``key[i]``.
    """
    key = _checked_key(key)
    width = len(key)
    rows = -(-len(message) // width)
    padded = message.ljust(rows * width)
    blocks = [""] * width
    for column, rank in enumerate(key):
        blocks[rank - 1] = padded[column::width]
    return "".join(blocks)


def row_column_decrypt(ciphertext: str, key: Sequence[int]) -> str:
    """Undo :func:`row_column_encrypt`; padding spaces are kept."""
    key = _checked_key(key)
    width = len(key)
    if len(ciphertext) % width:
        raise ValueError("ciphertext length must be a multiple of the key length")
    rows = len(ciphertext) // width
    blocks = [ciphertext[start:start + rows] for start in range(0, len(ciphertext), rows or 1)]
    if rows == 0:
        return ""
    columns = [blocks[rank - 1] for rank in key]
    return "".join("".join(row) for row in zip(*columns))


def row_column_keyword_encrypt(
    message: str, keyword: str, key_list: KeyList
) -> tuple[int, str]:
    """Register *keyword* in *key_list* and encrypt with its letter order.

    Returns the keyword's id and the ciphertext.
    """
    if not keyword:
        raise ValueError("keyword must not be empty")
    key_id = key_list.add(keyword)
    return key_id, row_column_encrypt(message, key_order(keyword))