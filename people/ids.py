# people/ids.py

import random
import uuid

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36_fraction(value: float, digits: int) -> str:
    chars = []
    for _ in range(digits):
        value *= 36
        digit = int(value)
        chars.append(ALPHABET[digit])
        value -= digit
        if value == 0:
            break
    return "".join(chars)


def generate_id() -> str:
    """
    Short opaque id: "_" + up to 9 base-36 chars of a random fraction.
    Collisions are unlikely at registry scale and are not retried.
    """
    return "_" + _to_base36_fraction(random.random(), 9)


def generate_uuid_id() -> str:
    return "_" + uuid.uuid4().hex


ID_STRATEGIES = {
    "random": generate_id,
    "uuid": generate_uuid_id,
}
