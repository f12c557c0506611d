"""Classical substitution ciphers over the 26-letter Latin alphabet."""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable
from itertools import cycle

from .modular import multiplicative_inverse

ALPHABET_SIZE = 26

_PLAYFAIR_LETTERS = string.ascii_uppercase.replace("J", "")
_FILLER = "X"
_FILLER_AFTER_X = "Q"


def _is_letter(char: str) -> bool:
    return char in string.ascii_letters


def _transform(text: str, shift: Callable[[int, int], int]) -> str:
    """Map every ASCII letter through *shift*, keeping case and other characters.

    *shift* receives the running letter position and the letter's value
    (0 for A) and returns the new value, which is reduced modulo 26.
    """
    out = []
    position = 0
    for char in text:
        if _is_letter(char):
            base = ord("a") if char.islower() else ord("A")
            value = shift(position, ord(char) - base) % ALPHABET_SIZE
            out.append(chr(base + value))
            position += 1
        else:
            out.append(char)
    return "".join(out)


def _key_values(key: str) -> list[int]:
    if not key:
        raise ValueError("key must not be empty")
    if not all(_is_letter(char) for char in key):
        raise ValueError(f"key must contain only letters, got {key!r}")
    return [ord(char.upper()) - ord("A") for char in key]


def _check_int_key(key: int) -> int:
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"key must be an integer, got {key!r}")
    return key


def caesar_encrypt(message: str, key: int) -> str:
    """Shift every letter forward by *key* places."""
    key = _check_int_key(key)
    return _transform(message, lambda _, value: value + key)


def caesar_decrypt(ciphertext: str, key: int) -> str:
    """Undo :func:`caesar_encrypt`."""
    key = _check_int_key(key)
    return _transform(ciphertext, lambda _, value: value - key)


def multiplicative_encrypt(message: str, key: int) -> str:
    """Multiply every letter's value by *key* modulo 26."""
    key = _check_int_key(key)
    return _transform(message, lambda _, value: value * key)


def multiplicative_decrypt(ciphertext: str, key: int) -> str:
    """Undo :func:`multiplicative_encrypt`; *key* must be coprime with 26."""
    inverse = multiplicative_inverse(_check_int_key(key), ALPHABET_SIZE)
    return _transform(ciphertext, lambda _, value: value * inverse)


def affine_encrypt(message: str, multiplier: int, adder: int) -> str:
    """Map every letter value ``p`` to ``multiplier * p + adder`` modulo 26."""
    multiplier = _check_int_key(multiplier)
    adder = _check_int_key(adder)
    return _transform(message, lambda _, value: value * multiplier + adder)


def affine_decrypt(ciphertext: str, multiplier: int, adder: int) -> str:
    """Undo :func:`affine_encrypt`; *multiplier* must be coprime with 26."""
    inverse = multiplicative_inverse(_check_int_key(multiplier), ALPHABET_SIZE)
    adder = _check_int_key(adder)
    return _transform(ciphertext, lambda _, value: (value - adder) * inverse)


def vigenere_encrypt(message: str, key: str) -> str:
    """Shift each letter by the matching letter of the repeating *key*."""
    shifts = _key_values(key)
    return _transform(message, lambda pos, value: value + shifts[pos % len(shifts)])


def vigenere_decrypt(ciphertext: str, key: str) -> str:
    """Undo :func:`vigenere_encrypt`."""
    shifts = _key_values(key)
    return _transform(ciphertext, lambda pos, value: value - shifts[pos % len(shifts)])


def vernam_encrypt(message: str, key: str) -> bytes:
    """XOR the UTF-8 bytes of *message* with the repeating bytes of *key*."""
    if not key:
        raise ValueError("key must not be empty")
    data = message.encode("utf-8")
    return bytes(byte ^ pad for byte, pad in zip(data, cycle(key.encode("utf-8"))))


def vernam_decrypt(ciphertext: bytes, key: str) -> str:
    """Undo :func:`vernam_encrypt`."""
    if not key:
        raise ValueError("key must not be empty")
    data = bytes(byte ^ pad for byte, pad in zip(ciphertext, cycle(key.encode("utf-8"))))
    return data.decode("utf-8")


def _check_pad(text: str, key: str) -> list[int]:
    shifts = _key_values(key)
    letters = sum(1 for char in text if _is_letter(char))
    if letters != len(shifts):
        raise ValueError(
            f"one-time pad needs one key letter per message letter: "
            f"{letters} letters, key of {len(shifts)}"
        )
    return shifts


def one_time_pad_encrypt(message: str, key: str) -> str:
    """Shift each letter by its own key letter; the key is as long as the message."""
    shifts = _check_pad(message, key)
    return _transform(message, lambda pos, value: value + shifts[pos])


def one_time_pad_decrypt(ciphertext: str, key: str) -> str:
    """Undo :func:`one_time_pad_encrypt`."""
    shifts = _check_pad(ciphertext, key)
    return _transform(ciphertext, lambda pos, value: value - shifts[pos])


def _playfair_letters(text: str) -> list[str]:
    return ["I" if char == "J" else char for char in text.upper() if char in string.ascii_uppercase]


def _playfair_square(key: str) -> tuple[list[str], dict[str, tuple[int, int]]]:
    order = list(dict.fromkeys(_playfair_letters(key) + list(_PLAYFAIR_LETTERS)))
    grid = ["".join(order[row * 5:row * 5 + 5]) for row in range(5)]
    positions = {letter: divmod(index, 5) for index, letter in enumerate(order)}
    return grid, positions


def _digraphs(letters: Iterable[str]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    pending: str | None = None
    for letter in letters:
        if pending is None:
            pending = letter
        elif letter == pending:
            filler = _FILLER_AFTER_X if pending == _FILLER else _FILLER
            pairs.append((pending, filler))
            pending = letter
        else:
            pairs.append((pending, letter))
            pending = None
    if pending is not None:
        filler = _FILLER_AFTER_X if pending == _FILLER else _FILLER
        pairs.append((pending, filler))
    return pairs


def _playfair_apply(pairs: Iterable[tuple[str, str]], key: str, step: int) -> str:
    grid, positions = _playfair_square(key)
    out = []
    for first, second in pairs:
        row_a, col_a = positions[first]
        row_b, col_b = positions[second]
        if row_a == row_b:
            out += [grid[row_a][(col_a + step) % 5], grid[row_b][(col_b + step) % 5]]
        elif col_a == col_b:
            out += [grid[(row_a + step) % 5][col_a], grid[(row_b + step) % 5][col_b]]
        else:
            out += [grid[row_a][col_b], grid[row_b][col_a]]
    return "".join(out)


def playfair_encrypt(message: str, key: str) -> str:
    """Encrypt the letters of *message* with a Playfair square built from *key*.

    J is merged into I, doubled letters in a pair are split with X (Q after
    an X) and an odd final letter is padded the same way. The result is
    upper case with no separators.
    """
    return _playfair_apply(_digraphs(_playfair_letters(message)), key, 1)


def playfair_decrypt(ciphertext: str, key: str) -> str:
    """Undo :func:`playfair_encrypt`; filler letters are left in place."""
    letters = _playfair_letters(ciphertext)
    if len(letters) % 2:
        raise ValueError("Playfair ciphertext must have an even number of letters")
    pairs = list(zip(letters[::2], letters[1::2]))
    if any(first == second for first, second in pairs):
        raise ValueError("Playfair ciphertext cannot hold a pair of equal letters")
    return _playfair_apply(pairs, key, -1)