"""Classical substitution and transposition ciphers, a key list, and modular arithmetic."""

__version__ = "1.0.0"