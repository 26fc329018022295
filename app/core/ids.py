import secrets
import string
import time
from datetime import datetime, timezone

BASE36_ALPHABET = string.digits + string.ascii_lowercase
RANDOM_SUFFIX_LENGTH = 5


def to_base36(number: int) -> str:
    """Render a non-negative integer in lowercase base 36."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def new_id() -> str:
    """
    Generate a short, URL-safe record ID.

    Epoch milliseconds in base 36 followed by a random base-36 suffix.
    Collisions need two records in the same millisecond drawing the same
    suffix, which is negligible at classroom volumes.
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(RANDOM_SUFFIX_LENGTH))
    return to_base36(millis) + suffix


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2026-10-19T08:30:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
