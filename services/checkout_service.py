# services/checkout_service.py

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple

from models.basket import Basket
from services.pricing_service import PricingRule, default_rules

logger = logging.getLogger("supermarket.checkout")


class Market(ABC):
    # Anything that can price a basket given as a sequence of product codes.

    @abstractmethod
    def checkout(self, items: Iterable[str]) -> int:
        pass


class CheckoutService(Market):
    """
    Prices a basket by running every pricing rule against the item counts
    and adding up what each rule returns.

    The rule set is fixed when the service is built. Rules are evaluated in
    the order they were given; several rules may read the same product and
    their contributions simply add. Product codes no rule reads cost nothing.
    """

    def __init__(self, rules: Iterable[PricingRule]):
        rules = tuple(rules)
        for rule in rules:
            if not isinstance(rule, PricingRule):
                raise TypeError(f"Not a pricing rule: {rule!r}")
        self._rules: Tuple[PricingRule, ...] = rules
        logger.debug("Checkout ready with %d pricing rules", len(rules))

    @property
    def rules(self) -> Tuple[PricingRule, ...]:
        return self._rules

    def checkout(self, items: Iterable[str]) -> int:
        # counts is local to this call, so one service can be shared freely
        counts = Basket(items).counts()
        total = 0
        for rule in self._rules:
            total += rule.price(counts)
        return total

    def breakdown(self, items: Iterable[str]) -> List[Tuple[PricingRule, int]]:
        # What each rule charged for this basket, in rule order.
        counts = Basket(items).counts()
        return [(rule, rule.price(counts)) for rule in self._rules]


class Supermarket(CheckoutService):
    # The checkout with the store's default price list.

    def __init__(self):
        super().__init__(default_rules())
