"""Text helpers: special-character stripping and CPF/CNPJ validation."""

from __future__ import annotations

import re

_SPECIAL_CHARS = re.compile(r'[/\\<>:"|?*]')
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

_CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def remove_special_chars(text: str) -> str:
    """Remove slashes and characters not allowed in file names."""
    return _SPECIAL_CHARS.sub("", text)


def _check_digit(digits: list[int], weights: tuple[int, ...] | range) -> int:
    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def _valid_cpf(number: str) -> bool:
    digits = [int(c) for c in number]
    if digits[9] != _check_digit(digits[:9], range(10, 1, -1)):
        return False
    return digits[10] == _check_digit(digits[:10], range(11, 1, -1))


def _valid_cnpj(number: str) -> bool:
    digits = [int(c) for c in number]
    if digits[12] != _check_digit(digits[:12], _CNPJ_WEIGHTS_1):
        return False
    return digits[13] == _check_digit(digits[:13], _CNPJ_WEIGHTS_2)


def _all_digits(text: str) -> bool:
    return all("0" <= c <= "9" for c in text)


def valid_cnpj_cpf(document: str) -> bool:
    """Validate a CPF or CNPJ number, with or without punctuation.

    A 14-character alphanumeric CNPJ is accepted without check-digit
    verification.
    """
    number = _NON_ALNUM.sub("", document.strip())

    if len(number) == 11 and _all_digits(number):
        return _valid_cpf(number)
    if len(number) == 14:
        if _all_digits(number):
            return _valid_cnpj(number)
        return True
    return False