"""
Tests for dimension resolution, volume and storage capacity checks.

Run with: pytest -q
"""

import pytest

from dpp_logistics import models as m
from dpp_logistics import volume as volume_core


def example_product(**overrides):
    """
    Product with both packaging and bare product dimensions.
    """
    fields = dict(
        id="PRD-1",
        name="Kettle",
        packaging_height_cm=20.0,
        packaging_width_cm=30.0,
        packaging_depth_cm=40.0,
        product_height_cm=18.0,
        product_width_cm=25.0,
        product_depth_cm=35.0,
        gross_weight=2000.0,
    )
    fields.update(overrides)
    return m.Product(**fields)


def test_resolve_prefers_batch_packaging():
    product = example_product()
    batch = m.ProductBatch(
        id="B-1",
        packaging_height_cm=22.0,
        packaging_width_cm=32.0,
        packaging_depth_cm=42.0,
        product_height_cm=10.0,
        product_width_cm=10.0,
        product_depth_cm=10.0,
    )

    resolved = volume_core.resolve_effective_dimensions(product, batch)

    assert resolved is not None
    assert resolved.source == "packaging"
    assert resolved.dimensions == m.Dimensions(22.0, 32.0, 42.0)


def test_resolve_product_packaging_beats_batch_product_dims():
    product = example_product()
    batch = m.ProductBatch(
        id="B-1", product_height_cm=10.0, product_width_cm=10.0, product_depth_cm=10.0
    )

    resolved = volume_core.resolve_effective_dimensions(product, batch)

    assert resolved.source == "packaging"
    assert resolved.dimensions == m.Dimensions(20.0, 30.0, 40.0)


def test_resolve_falls_back_to_batch_then_product_dims():
    product = example_product(
        packaging_height_cm=None, packaging_width_cm=None, packaging_depth_cm=None
    )
    batch = m.ProductBatch(
        id="B-1", product_height_cm=10.0, product_width_cm=11.0, product_depth_cm=12.0
    )

    from_batch = volume_core.resolve_effective_dimensions(product, batch)
    from_product = volume_core.resolve_effective_dimensions(product)

    assert from_batch.source == "product"
    assert from_batch.dimensions == m.Dimensions(10.0, 11.0, 12.0)
    assert from_product.source == "product"
    assert from_product.dimensions == m.Dimensions(18.0, 25.0, 35.0)


def test_resolve_never_mixes_axes_across_sets():
    # Batch packaging has two axes only, product packaging has the third
    product = example_product(packaging_height_cm=None)
    batch = m.ProductBatch(id="B-1", packaging_height_cm=50.0, packaging_width_cm=50.0)

    resolved = volume_core.resolve_effective_dimensions(product, batch)

    assert resolved.source == "product"
    assert resolved.dimensions == m.Dimensions(18.0, 25.0, 35.0)


def test_resolve_treats_zero_as_missing():
    product = m.Product(
        id="PRD-0", packaging_height_cm=0.0, packaging_width_cm=30.0, packaging_depth_cm=40.0
    )

    assert volume_core.resolve_effective_dimensions(product) is None
    assert volume_core.calculate_volume(product, 10) is None


def test_calculate_volume():
    result = volume_core.calculate_volume(example_product(), 500)

    assert result is not None
    assert result.unit_volume_m3 == pytest.approx(0.024)
    assert result.total_volume_m3 == pytest.approx(12.0)
    assert result.total_volume_m3 == pytest.approx(result.unit_volume_m3 * result.quantity)
    assert result.source == "packaging"
    assert result.quantity == 500


@pytest.mark.parametrize(
    "dims,quantity",
    [((1.5, 2.5, 3.5), 7), ((120.0, 80.0, 100.0), 3), ((0.1, 0.2, 0.3), 100_000)],
)
def test_volume_round_trip(dims, quantity):
    h, w, d = dims
    product = m.Product(id="P", product_height_cm=h, product_width_cm=w, product_depth_cm=d)

    result = volume_core.calculate_volume(product, quantity)

    assert result.unit_volume_m3 == pytest.approx(h * w * d / 1_000_000)
    assert result.unit_volume_m3 * quantity == pytest.approx(result.total_volume_m3)


def test_calculate_volume_is_idempotent():
    product = example_product()
    assert volume_core.calculate_volume(product, 42) == volume_core.calculate_volume(product, 42)


@pytest.mark.parametrize(
    "incoming,capacity,used,status",
    [
        (7.9, 10.0, 0.0, "ok"),
        (8.0, 10.0, 0.0, "warning"),
        (0.5, 1.0, 0.5, "warning"),
        (1.0, 1.0, None, "warning"),
        (1.000001, 1.0, None, "over_capacity"),
        (5.0, 10.0, 6.0, "over_capacity"),
    ],
)
def test_analyze_capacity_thresholds(incoming, capacity, used, status):
    result = volume_core.analyze_capacity(incoming, capacity, used)
    assert result.status == status


def test_analyze_capacity_reports_remaining_and_fill():
    result = volume_core.analyze_capacity(3.0, 10.0, 5.0)

    assert result.fill_percent_after == pytest.approx(80.0)
    assert result.remaining_after_m3 == pytest.approx(2.0)
    assert result.location_capacity_m3 == 10.0

    over = volume_core.analyze_capacity(4.0, 10.0, 8.0)
    assert over.remaining_after_m3 == pytest.approx(-2.0)


@pytest.mark.parametrize("capacity", [None, 0.0, -5.0])
def test_analyze_capacity_unknown_without_capacity(capacity):
    result = volume_core.analyze_capacity(1.0, capacity, 0.5)

    assert result.status == "unknown"
    assert result.fill_percent_after == 0.0
    assert result.remaining_after_m3 == 0.0
    assert result.location_capacity_m3 == 0.0


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0 m³"),
        (0.0005, "0.000500 m³"),
        (0.024, "0.0240 m³"),
        (0.1, "0.10 m³"),
        (12.3456, "12.35 m³"),
    ],
)
def test_format_volume_m3(value, expected):
    assert volume_core.format_volume_m3(value) == expected
