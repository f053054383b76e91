from __future__ import annotations

import random
import time
from typing import Callable, Optional

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_RANDOM_BITS = 52

_system_random = random.SystemRandom()


def _base36(n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n:
        n, r = divmod(n, 36)
        digits.append(_ALPHABET[r])
    return "".join(reversed(digits))


def generate_id(
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], float]] = None,
) -> str:
    """Return an opaque task id: a random base36 part followed by epoch millis in base36.

    Uniqueness is probabilistic only. Pass a seeded ``rng`` and a fixed ``clock``
    to get reproducible ids in tests.
    """
    rng = rng or _system_random
    clock = clock or time.time

    random_part = _base36(rng.getrandbits(_RANDOM_BITS))
    time_part = _base36(int(clock() * 1000))
    return random_part + time_part
