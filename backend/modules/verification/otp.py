"""
One-time password generation.

The code is a usability check for email ownership, not a secret with
cryptographic strength.
"""

import random

OTP_MIN = 1000
OTP_MAX = 1999


def generate_otp() -> int:
    """Random code in [1000, 1999]."""
    return random.randint(OTP_MIN, OTP_MAX)


def format_otp(otp: int) -> str:
    """Fixed-width string form of a code."""
    return f"{otp:04d}"
