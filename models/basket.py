# models/basket.py
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable

# Basket model: the raw scanned items and their per-product counts.


def count_items(items: Iterable[str]) -> Dict[str, int]:
    # Every symbol is counted as-is, separators included.
    # A symbol no rule knows about simply ends up with a count nobody reads.
    if items is None:
        raise ValueError("items must not be None")
    return dict(Counter(items))


@dataclass(frozen=True)
class Basket:
    items: Iterable[str] = ""

    def __post_init__(self):
        if self.items is None:
            raise ValueError("items must not be None")

    def __len__(self) -> int:
        return len(self.items)

    def counts(self) -> Dict[str, int]:
        return count_items(self.items)
