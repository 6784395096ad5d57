"""Exercises on strings."""


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` is a palindrome once non-alphanumeric ASCII is dropped and case ignored."""
    cleaned = [c.lower() for c in s if c.isascii() and c.isalnum()]
    return cleaned == cleaned[::-1]