from __future__ import annotations

# A character vector is a set of letters stored as a bit vector: bit i
# (counting from the LSB) is on exactly when the i-th letter of the
# alphabet is in the set. The alphabet is 'a'..'z' inclusive.

ALPHABET_START = ord('a')
ALPHABET_END = ord('z')
ALPHABET_SIZE = ALPHABET_END - ALPHABET_START + 1
ALPHABET_MASK = (1 << ALPHABET_SIZE) - 1


def in_alphabet(word: str) -> bool:
    # Raw code points: 'A' is not in the alphabet.
    for ch in word:
        o = ord(ch)
        if o < ALPHABET_START or o > ALPHABET_END:
            return False
    return True


def string_to_vector(word: str) -> int:
    """Character vector for the letters of `word`.

    Every character must already be in the alphabet; callers validate with
    `in_alphabet` first.
    """
    result = 0
    for ch in word:
        result |= 1 << (ord(ch) - ALPHABET_START)
    return result


def vector_to_string(vec: int) -> str:
    """Distinct letters of `vec`, in alphabet order."""
    chars = []
    vec &= ALPHABET_MASK
    while vec:
        low = vec & -vec
        chars.append(chr(ALPHABET_START + low.bit_length() - 1))
        vec ^= low
    return ''.join(chars)


def popcount(vec: int) -> int:
    return bin(vec).count('1')


def sanitize(text: str) -> str:
    # Lowercase and drop anything that is not a letter of the alphabet.
    return ''.join(ch for ch in text.lower() if in_alphabet(ch))
