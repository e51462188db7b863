# sim/rng.py
from zlib import crc32

import numpy as np


def _tag(s: str) -> int:
    return crc32(s.encode("utf-8")) & 0xFFFFFFFF


class RNGRegistry:
    """
    Seeded numpy generators for synthetic graphs and randomized queries.

    ``stream("points")`` and ``stream("graph", 3)`` are independent of each
    other and of the order in which they are first requested. Generators are
    cached on the instance, so a registry hands out the same (stateful)
    generator for the same key until it is dropped.
    """

    def __init__(self, seed: int, *, scenario: str = ""):
        if seed < 0:
            raise ValueError("seed must be >= 0")
        self.seed = seed
        self.scenario = scenario
        self._streams: dict[tuple[str, tuple[int, ...]], np.random.Generator] = {}

    def stream(self, name: str, *keys: int) -> np.random.Generator:
        key = (name, tuple(int(k) for k in keys))
        gen = self._streams.get(key)
        if gen is None:
            ss = np.random.SeedSequence([self.seed, _tag(self.scenario), _tag(name), *key[1]])
            gen = self._streams[key] = np.random.default_rng(ss)
        return gen
