import hashlib
from collections import Counter
from typing import Dict


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string's UTF-8 bytes, as lowercase hex"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, everything else significant)"""
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string, case-sensitive"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens; 0 for blank strings"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character as it appears"""
    return dict(Counter(text))


def analyze(value: str) -> Dict:
    """
    Analyze a string and return all computed properties.

    Python strings are sequences of codepoints, so length, uniqueness and
    frequency all count codepoints rather than bytes or UTF-16 units.
    """
    sha256_hash = compute_sha256(value)

    return {
        "id": sha256_hash,
        "value": value,
        "length": len(value),
        "is_palindrome": is_palindrome(value),
        "unique_characters": count_unique_characters(value),
        "word_count": count_words(value),
        "sha256_hash": sha256_hash,
        "character_frequency_map": get_character_frequency(value),
    }
