"""Tests for the individual pricing rules."""

import dataclasses

import pytest

from services.pricing_service import (
    BundlePrice,
    FlatPrice,
    PricingRule,
    default_rules,
)


def test_flat_price_charges_per_unit():
    assert FlatPrice("A", 20).price({"A": 3}) == 60


def test_flat_price_absent_product_is_free():
    assert FlatPrice("A", 20).price({"B": 7}) == 0


def test_flat_price_allows_negative_cost():
    coupon = FlatPrice("Q", -5)
    assert coupon.price({"Q": 2}) == -10


def test_flat_price_ignores_other_products():
    assert FlatPrice("C", 30).price({"A": 1, "C": 2, " ": 4}) == 60


@pytest.mark.parametrize(
    "count, expected",
    [
        (0, 0),
        (1, 50),
        (4, 200),
        (5, 150),
        (6, 200),
        (10, 300),
        (12, 400),
    ],
)
def test_bundle_price(count, expected):
    rule = BundlePrice("B", lone_cost=50, bundle_size=5, bundle_cost=150)
    assert rule.price({"B": count}) == expected


def test_bundle_price_absent_product_is_free():
    rule = BundlePrice("B", lone_cost=50, bundle_size=5, bundle_cost=150)
    assert rule.price({}) == 0


def test_bundle_of_one_is_just_the_bundle_cost():
    rule = BundlePrice("B", lone_cost=50, bundle_size=1, bundle_cost=40)
    assert rule.price({"B": 3}) == 120


@pytest.mark.parametrize("size", [0, -1, -5, 2.5, True, "5", None])
def test_bundle_size_must_be_positive(size):
    with pytest.raises(ValueError, match="Bundle size"):
        BundlePrice("B", lone_cost=50, bundle_size=size, bundle_cost=150)


@pytest.mark.parametrize("make", [
    lambda: FlatPrice("", 20),
    lambda: BundlePrice("", 50, 5, 150),
])
def test_product_code_is_required(make):
    with pytest.raises(ValueError):
        make()


def test_rules_do_not_modify_counts():
    counts = {"A": 2, "B": 6}
    FlatPrice("A", 20).price(counts)
    BundlePrice("B", 50, 5, 150).price(counts)
    assert counts == {"A": 2, "B": 6}


def test_rules_are_immutable():
    rule = FlatPrice("A", 20)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.cost = 0


def test_pricing_rule_is_abstract():
    with pytest.raises(TypeError):
        PricingRule()


def test_default_rules():
    assert default_rules() == [
        FlatPrice("A", 20),
        BundlePrice("B", lone_cost=50, bundle_size=5, bundle_cost=150),
        FlatPrice("C", 30),
    ]


def test_fractional_bundle_size_never_reaches_checkout():
    with pytest.raises(ValueError, match="positive integer"):
        BundlePrice("B", lone_cost=50, bundle_size=2.5, bundle_cost=100)
