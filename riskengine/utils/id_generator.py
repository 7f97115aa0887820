"""Deterministic identifiers drawn from an injected random generator"""

import random
import uuid


def generate_id(prefix: str, rng: random.Random) -> str:
    """Prefixed UUID4 drawn from the caller's generator, so seeded runs repeat."""
    return f"{prefix}-{uuid.UUID(int=rng.getrandbits(128), version=4)}"


def generate_digits(length: int, rng: random.Random) -> str:
    return "".join(str(rng.randrange(10)) for _ in range(length))


def generate_ip_address(rng: random.Random) -> str:
    return ".".join(str(rng.randrange(255)) for _ in range(4))
