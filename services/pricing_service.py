# services/pricing_service.py

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Mapping

# Default price list (whole currency units).
PRICE_A = 20
PRICE_B = 50
BUNDLE_SIZE_B = 5
BUNDLE_PRICE_B = 150
PRICE_C = 30


class PricingRule(ABC):
    # Abstract base class for all pricing rules.
    # A rule sees the whole count mapping and returns its own contribution,
    # which may be zero or negative (coupons, combo deals).
    # Rules must only read the mapping.

    product: str

    @abstractmethod
    def price(self, counts: Mapping[str, int]) -> int:
        pass


def _check_product(product: str) -> None:
    if not product:
        raise ValueError("A pricing rule needs a product code.")


@dataclass(frozen=True)
class FlatPrice(PricingRule):
    # Every unit of the product costs the same amount.
    product: str
    cost: int

    def __post_init__(self):
        _check_product(self.product)

    def price(self, counts):
        return counts.get(self.product, 0) * self.cost


@dataclass(frozen=True)
class BundlePrice(PricingRule):
    """
    "lone_cost apiece, or bundle_cost when you buy bundle_size of them".

    There is no cap on the number of bundles: a count is split into as many
    full bundles as fit, and the remainder is charged per unit. A partial
    bundle never gets the bundle rate.
    """

    product: str
    lone_cost: int
    bundle_size: int
    bundle_cost: int

    def __post_init__(self):
        _check_product(self.product)
        size = self.bundle_size
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(
                f"Bundle size for {self.product!r} must be a positive integer, "
                f"got {self.bundle_size}."
            )

    def price(self, counts):
        bundles, leftovers = divmod(counts.get(self.product, 0), self.bundle_size)
        return bundles * self.bundle_cost + leftovers * self.lone_cost


def default_rules() -> List[PricingRule]:
    # The store's standing price list: A and C flat, B sold in fives.
    return [
        FlatPrice("A", PRICE_A),
        BundlePrice("B", lone_cost=PRICE_B, bundle_size=BUNDLE_SIZE_B, bundle_cost=BUNDLE_PRICE_B),
        FlatPrice("C", PRICE_C),
    ]

