"""Palindrome check."""


def is_palindrome(word: str) -> bool:
    """Does ``word`` read the same forwards and backwards, character by character?"""
    return all(a == b for a, b in zip(word, reversed(word)))