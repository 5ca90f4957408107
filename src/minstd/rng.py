# src/minstd/rng.py
# Lehmer "minstd" core: x' = 48271 * x mod (2^31 - 1).

from dataclasses import dataclass

A = 48271
M = 0x7FFFFFFF  # 2^31-1
# modular inverse of A (so we can step backward exactly)
INV_A = 1899818559  # because (A * INV_A) % M == 1
SEED = 1234

# Engine output range; 0 is never produced from a nonzero state.
MIN_VALUE = 1
MAX_VALUE = M - 1

def minstd_next(state: int) -> int:
    """
    One Lehmer step. 0 is an absorbing fixed point: minstd_next(0) == 0.
    """
    return (state * A) % M

def minstd_prev(state: int) -> int:
    return (state * INV_A) % M

def minstd_next_twice(state: int) -> int:
    # A^2 mod M, folded once so two steps cost one multiply
    return (state * ((A * A) % M)) % M

def minstd_skip(state: int, n: int) -> int:
    """Advance `state` by n steps using A^n mod M."""
    if n < 0:
        raise ValueError("n must be >= 0")
    return (state * pow(A, n, M)) % M

@dataclass
class MinstdRand:
    state: int

    @classmethod
    def seeded(cls, seed: int = SEED) -> "MinstdRand":
        """
        Seed like a standard minstd_rand engine: reduce mod M, and never
        start on the fixed point (a reduced 0 becomes 1).
        """
        s = seed % M
        if s == 0:
            s = 1
        return cls(state=s)

    def next32(self) -> int:
        # ADVANCE first, then return
        self.state = minstd_next(self.state)
        return self.state

    __call__ = next32

    def discard(self, n: int) -> None:
        self.state = minstd_skip(self.state, n)

    def bounded(self, n: int) -> int:
        """Return a value in 1..n."""
        if n <= 0:
            raise ValueError("n must be > 0")
        return (self.next32() % n) + 1

    def in_range(self, lo: int, hi: int) -> int:
        """Return a value in [lo, hi)."""
        if hi <= lo:
            raise ValueError("hi must be greater than lo")
        return (self.next32() % (hi - lo)) + lo
