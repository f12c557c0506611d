# cryptoeq

Classical ciphers and the modular arithmetic behind them, in pure Python
with no third-party dependencies.

## Modules

### `cryptoeq.modular`

- `mod_add`, `mod_subtract`, `mod_multiply`, `mod_divide`. Each takes
  `(first, second, modulus)` and reduces both operands before it applies the
  operation. `mod_divide` is integer division of the reduced operands. It is
  not multiplication by an inverse.
- `gcd(first, second)` and `multi_gcd(*args)` compute greatest common
  divisors. `multi_gcd` raises `ValueError` when it is called with no
  arguments.
- `is_coprime(first, second)` checks whether two numbers have no common
  factor above 1.
- `extended_euclid(number, modulo)` and `multiplicative_inverse(number, modulo)`
  return the inverse of `number` modulo `modulo`. They raise `ValueError`
  when the two numbers are not coprime.
- `solve_congruences(pairs)` solves a system of congruences by the Chinese
  remainder theorem. It raises `ValueError` when the list is empty or when
  two moduli are not coprime.
- `Modulus(value, modulus)` is a frozen value type. The modulus must be
  positive. It supports `+`, `-`, `*` and `//` with another `Modulus` of the
  same modulus, and raises `ValueError` when the moduli differ.
  `.inverse()` returns the multiplicative inverse.

### `cryptoeq.substitution`

Each cipher has an `*_encrypt` function and a matching `*_decrypt` function.

- `caesar_*`, `multiplicative_*` and `affine_*` work with integer keys. The
  affine functions take `(text, multiplier, adder)`. Decryption needs the key
  or multiplier to be coprime with 26, otherwise it raises `ValueError`.
- `vigenere_*` uses a repeating letter key. `one_time_pad_*` needs exactly one
  key letter for each letter of the message.
- These ciphers change only ASCII letters and keep their case. All other
  characters pass through unchanged.
- `vernam_encrypt(message, key)` XORs the UTF-8 bytes of the message with the
  repeating key and returns `bytes`. `vernam_decrypt(ciphertext, key)` turns
  those bytes back into the string.
- `playfair_encrypt(message, key)` and `playfair_decrypt(ciphertext, key)`
  use a 5×5 square in which J is merged into I.
  - A pair of doubled letters is split with X, or with Q when the doubled
    letter is X itself. An odd final letter is padded in the same way.
  - The output is upper case with no separators.
  - Decryption leaves the filler letters in place.

### `cryptoeq.transposition`

- `rail_fence_encrypt(message, depth)` and `rail_fence_decrypt(ciphertext, depth)`
  implement the rail fence cipher.
- `row_column_encrypt(message, key)` and `row_column_decrypt(ciphertext, key)`
  implement the row–column transposition.
  - `key` is a permutation of `1..n`.
  - Encryption pads the last row with spaces. Decryption keeps that padding.
- `row_column_keyword_encrypt(message, keyword, key_list)` ranks the letters
  of a keyword to get the column order. It also registers the keyword in a
  `KeyList` and returns `(key_id, ciphertext)`.

### `cryptoeq.keylist`

`KeyList` stores keys and numbers them from 1:

- `add` stores a key and returns its id.
- `get_key` looks a key up by id.
- `get_id` looks an id up by key.
- `delete` removes a key.
- `display` prints the list.

It also supports `len()` and iteration over `(id, key)` pairs. A lookup or
deletion of a missing entry raises `KeyError`.

### `cryptoeq.utility`

- `are_equal_strings(first, second)` compares two strings.
- `key_order(key)` ranks the items of a key from 1 upwards. Ties are ranked
  from left to right.

## Examples

```python
from cryptoeq.modular import Modulus, extended_euclid, solve_congruences
from cryptoeq.substitution import caesar_encrypt, caesar_decrypt

extended_euclid(3, 11)                    # 4, since 3 * 4 = 12 = 1 (mod 11)
solve_congruences([Modulus(2, 3), Modulus(3, 5), Modulus(2, 7)])  # 23
caesar_encrypt("Hello", 3)                # "Khoor"
caesar_decrypt("Khoor", 3)                # "Hello"
```

```python
from cryptoeq.keylist import KeyList

keys = KeyList()
key_id = keys.add("placeholder")
keys.get_key(key_id)                      # "placeholder"
keys.get_id("placeholder")                # key_id
```

## Command line

Installing the package provides a `cryptoeq` command. It prints the inverse
of `NUMBER` modulo `MODULO`, which default to 3 and 11:

```
cryptoeq
cryptoeq 7 26
```

When the two numbers are not coprime, the command writes an error to stderr
and exits with status 1.

## Limitations

- The package has no Hill cipher.
- `KeyList` keeps keys in memory only and does not save them anywhere.
- The command computes modular inverses only. The ciphers are available
  through the Python API alone.

## Tests

```
pip install .[test]
pytest
```