"""Palindrome checks."""


def is_palindrome_simple(text: str) -> bool:
    """Case-sensitive check that considers every character."""
    return text == text[::-1]


def is_palindrome_advanced(text: str) -> bool:
    """Case-insensitive check that ignores everything except letters."""
    letters = [ch for ch in text.lower() if ch.isalpha()]
    return letters == letters[::-1]