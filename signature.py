# signature.py
# Word <-> keypad signature conversion and input validation.

import string

from utils import KEYPAD


def encode(word: str) -> str:
    """
    Return the keypad signature of ``word`` ("cat" -> "228").
    Raises ValueError on a character with no key; check with
    is_alphabetic_word() first.
    """
    out = []
    for ch in word.lower():
        digit = KEYPAD.get(ch)
        if digit is None:
            raise ValueError(f"no keypad digit for {ch!r} in {word!r}")
        out.append(digit)
    return "".join(out)


def is_alphabetic_word(word: str) -> bool:
    """True if every character is a keypad letter. The empty string passes."""
    return all(ch in KEYPAD for ch in word.lower())


def is_valid_signature_query(signature: str) -> bool:
    # Syntactic only: "0", "1" or an unknown signature still match nothing.
    return all(ch in string.digits for ch in signature)
