"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_INT_BITS = 32


class InputError(ValueError):
    """Raised when the arguments do not form a valid set of numbers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Read a leading integer the way a 32-bit C int would hold it."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(sign * value)


def split_words(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def is_number(text: str) -> bool:
    """Tell whether the text is an optional sign followed by decimal digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def is_space(text: str) -> bool:
    """Tell whether a non-empty text holds only whitespace."""
    return bool(text) and all(char in _WHITESPACE for char in text)


def is_same(text: str, check: str) -> bool:
    """Tell whether two numerals denote the same number, ignoring leading zeros."""
    if atoi(text) == 0 and atoi(check) == 0:
        return True
    if text.startswith("-") != check.startswith("-"):
        return False
    if text[:1] in ("+", "-"):
        text = text[1:]
    if check[:1] in ("+", "-"):
        check = check[1:]
    return text.lstrip("0") == check.lstrip("0")


def is_in_limit(args: Iterable[str]) -> bool:
    """Tell whether every number in the arguments fits in a 32-bit int."""
    return all(
        is_same(word, str(atoi(word)))
        for arg in args
        for word in split_words(arg, " ")
    )


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the arguments into a list of distinct numbers or raise InputError."""
    args = list(args)
    if any(not arg or is_space(arg) for arg in args):
        raise InputError()
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for word in split_words(arg, " "):
            number = atoi(word)
            if not is_number(word) or number in seen:
                raise InputError()
            seen.add(number)
            numbers.append(number)
    if not is_in_limit(args):
        raise InputError()
    return numbers