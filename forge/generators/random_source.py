"""
Secure Random Source
=====================

Unbiased integer sampling and in-place shuffling on top of the operating
system CSPRNG.

Naive ``raw % bound`` reduction over a 32-bit draw favours the low end of
``[0, bound)`` whenever ``bound`` does not divide ``2^32``. Every draw is
therefore rejection-sampled: raw values at or above the largest multiple
of ``bound`` that fits in 32 bits are discarded and redrawn, leaving each
residue with exactly the same number of accepting raw values.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2:
      Seminumerical Algorithms (3rd ed.). Addison-Wesley. Section 3.4.2.
    - Durstenfeld, R. (1964). Algorithm 235: Random Permutation.
      Communications of the ACM, 7(7), 420.
    - NIST SP 800-90A Rev. 1 (2015). Recommendation for Random Number
      Generation Using Deterministic Random Bit Generators.
"""

from __future__ import annotations

import secrets
from typing import Callable, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

_UINT32_RANGE: int = 1 << 32


class SecureRandomSource:
    """Cryptographically secure, bias-free sampling primitives.

    The instance holds no state besides the entropy callable; every draw
    reads fresh bytes, so one source may be shared freely between threads.

    Usage::

        rng = SecureRandomSource()
        index = rng.uniform(62)
        char = rng.select("abc")
        chars = list("password")
        rng.shuffle(chars)

    Args:
        entropy: Callable returning ``n`` cryptographically secure random
            bytes. Defaults to :func:`secrets.token_bytes`.
    """

    def __init__(self, entropy: Callable[[int], bytes] = secrets.token_bytes) -> None:
        self._entropy = entropy

    def _draw_uint32(self) -> int:
        return int.from_bytes(self._entropy(4), "little")

    def uniform(self, bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, bound)``.

        ``bound == 0`` returns ``0``; callers must not use that result as
        an index.

        Raises:
            ValueError: If *bound* is negative or larger than ``2^32``.
        """
        if bound < 0 or bound > _UINT32_RANGE:
            raise ValueError(f"bound must be in [0, 2^32], got {bound}")
        if bound == 0:
            return 0

        limit = _UINT32_RANGE - (_UINT32_RANGE % bound)
        while True:
            raw = self._draw_uint32()
            if raw < limit:
                return raw % bound

    def select(self, alphabet: Sequence[T]) -> T:
        """Return one element of *alphabet* chosen uniformly.

        Raises:
            ValueError: If *alphabet* is empty.
        """
        if not alphabet:
            raise ValueError("cannot select from an empty alphabet")
        return alphabet[self.uniform(len(alphabet))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle *items* in place (Fisher-Yates, forward variant)."""
        n = len(items)
        for i in range(n - 1):
            j = i + self.uniform(n - i)
            items[i], items[j] = items[j], items[i]

    def shuffled(self, text: str) -> str:
        """Return a uniformly random permutation of *text*."""
        chars = list(text)
        self.shuffle(chars)
        return "".join(chars)
