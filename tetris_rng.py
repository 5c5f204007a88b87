"""Uniform shape randomizer"""
import random
from typing import Optional

class ShapeRandom:
    COUNT = 7
    def __init__(self, seed: Optional[int]=None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_index(self) -> int:
        return self._random.randrange(self.COUNT)
