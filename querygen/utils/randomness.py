"""
Random helpers shared by data generation and token rendering.

All randomness flows through a numpy ``Generator``. Callers may inject one;
otherwise the process-wide generator (seeded from settings) is used.
"""

import logging
import string
from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from querygen.config.settings import get_settings
from querygen.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "_"
_LETTER_COUNT = 52

_rng: np.random.Generator | None = None


def get_rng() -> np.random.Generator:
    """Return the process-wide random generator, creating it on first use."""
    global _rng
    if _rng is None:
        seed = get_settings().random_seed
        logger.debug("Creating process-wide random generator (seed=%s)", seed)
        _rng = np.random.default_rng(seed)
    return _rng


def reset_rng(seed: int | None = None) -> np.random.Generator:
    """Replace the process-wide generator with a freshly seeded one."""
    global _rng
    _rng = np.random.default_rng(seed)
    return _rng


def get_random_integer(upper_bound: int, rng: np.random.Generator | None = None) -> int:
    """Return a random integer in ``[0, upper_bound]``.

    Raises:
        InvalidArgumentError: If upper_bound is negative.
    """
    if upper_bound < 0:
        raise InvalidArgumentError("Upper bound cannot be negative")
    rng = rng if rng is not None else get_rng()
    return int(rng.integers(0, upper_bound, endpoint=True))


def get_random_element(items: Sequence[T], rng: np.random.Generator | None = None) -> T:
    """Return a uniformly chosen element of a non-empty sequence."""
    if len(items) == 0:
        raise InvalidArgumentError("Sequence must contain at least one element")
    rng = rng if rng is not None else get_rng()
    return items[int(rng.integers(0, len(items)))]


def get_random_sample(
    items: Sequence[T],
    count: int,
    rng: np.random.Generator | None = None,
) -> list[T]:
    """Return ``count`` distinct elements of ``items`` in draw order."""
    if count < 0 or count > len(items):
        raise InvalidArgumentError(
            f"Cannot sample {count} element(s) from a sequence of {len(items)}"
        )
    rng = rng if rng is not None else get_rng()
    indices = rng.choice(len(items), size=count, replace=False)
    return [items[int(i)] for i in indices]


def coin_flip(rng: np.random.Generator | None = None) -> bool:
    rng = rng if rng is not None else get_rng()
    return bool(rng.integers(0, 2))


def get_random_string(length: int, rng: np.random.Generator | None = None) -> str:
    """Return a random string over ``[A-Za-z0-9_]`` that never starts with a digit."""
    if length <= 0:
        raise InvalidArgumentError("Random string must have positive length")
    rng = rng if rng is not None else get_rng()

    chars = []
    for i in range(length):
        char = CHARSET[int(rng.integers(0, len(CHARSET)))]
        if i == 0 and char.isdigit():
            # SQL identifiers can't start with digits
            char = CHARSET[int(rng.integers(0, _LETTER_COUNT))]
        chars.append(char)
    return "".join(chars)


def get_random_bit_string(length: int, rng: np.random.Generator | None = None) -> str:
    """Return a random string of 0s and 1s."""
    if length <= 0:
        raise InvalidArgumentError("Random byte string must have positive length")
    rng = rng if rng is not None else get_rng()
    bits = rng.integers(0, 2, size=length)
    return "".join("1" if bit else "0" for bit in bits)
