from .errors import InvalidConfiguration

MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5

def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32

class Mulberry32:
    """mulberry32: a 32-bit state stream of floats in [0, 1).

    Pure integer arithmetic masked to 32 bits, so a stored seed regenerates
    the same stream on any platform.
    """

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= MASK32:
            raise InvalidConfiguration(f"seed must be an unsigned 32-bit integer, got {seed!r}")
        self.state = seed

    def next_uint32(self) -> int:
        self.state = (self.state + INCREMENT) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return (t ^ (t >> 14)) & MASK32

    def random(self) -> float:
        return self.next_uint32() / 4294967296.0

    __call__ = random

def mulberry32(seed: int) -> Mulberry32:
    return Mulberry32(seed)
