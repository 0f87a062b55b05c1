"""Luhn checksum used by the last digit of a personnummer."""


def luhn_checksum(digits: str) -> int:
    """
    Calculate Luhn checksum digit.

    The Luhn algorithm:
    1. Double every second digit, starting with the rightmost
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10
    """
    total = 0
    last = len(digits) - 1
    for i, digit in enumerate(digits):
        d = int(digit)
        if (last - i) % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10


def verify_checksum(digits: str, check: int) -> bool:
    """Check that `check` is the Luhn checksum of `digits`."""
    return luhn_checksum(digits) == check
