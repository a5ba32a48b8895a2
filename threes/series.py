"""
Geometric progression of tile values.

Two seed terms u(0), u(1) are followed by (u(0) + u(1)) * ratio^(n - 2),
e.g. 1, 2, 3, 6, 12, 24, ... for Series(1, 2, 2).
"""

import math
from dataclasses import dataclass

from threes.config import RATIO, SEED_VALUES


@dataclass(frozen=True)
class Series:
    """Closed-form progression and its (approximate) inverse."""
    u_0: int
    u_1: int
    ratio: int

    # Rank of the first merge-derived term
    N_0 = 2

    @classmethod
    def default(cls) -> 'Series':
        return cls(SEED_VALUES[0], SEED_VALUES[1], RATIO)

    @property
    def seed_total(self) -> int:
        return self.u_0 + self.u_1

    @property
    def max_seed(self) -> int:
        return max(self.u_0, self.u_1)

    def u_n(self, n: int) -> int:
        """Value at rank ``n``."""
        if n == 0:
            return self.u_0
        if n == 1:
            return self.u_1
        return self.seed_total * self.ratio ** (n - self.N_0)

    def u_n_rec(self, n: int) -> int:
        """Recursive form of ``u_n``, kept to cross-check the closed form."""
        if n == 0:
            return self.u_0
        if n == 1:
            return self.u_1
        if n == 2:
            return self.seed_total
        return self.u_n_rec(n - 1) * self.ratio

    def n(self, value: int) -> int:
        """
        Rank of ``value``.

        Exact for any output of ``u_n``. Other values are floored onto the
        rank of the largest term not above them; anything below the seed
        total that is not a seed maps to rank 0.
        """
        if value == self.u_0:
            return 0
        if value == self.u_1:
            return 1
        quotient = value // self.seed_total
        if quotient < 1:
            return 0
        exponent = int(math.floor(math.log(quotient, self.ratio)))
        # The float log can land just under an exact power
        while self.ratio ** (exponent + 1) <= quotient:
            exponent += 1
        while exponent > 0 and self.ratio ** exponent > quotient:
            exponent -= 1
        return exponent + self.N_0
