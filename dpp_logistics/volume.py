# dpp_logistics/volume.py
"""
Dimension resolution, volume calculation and storage-location capacity checks.

Pure functions: no state, no I/O. A `None` return means "cannot compute"
(no complete dimension set), not an error.
"""

from __future__ import annotations

from typing import Optional

from .catalog import CAPACITY_FULL_PCT, CAPACITY_WARNING_PCT
from .models import (
    CapacityAnalysis,
    CapacityStatus,
    Dimensions,
    Product,
    ProductBatch,
    ResolvedDimensions,
    VolumeResult,
)

CM3_PER_M3 = 1_000_000


def _complete(h: Optional[float], w: Optional[float], d: Optional[float]) -> bool:
    # zero counts as missing: a flat box is not a usable dimension set
    return bool(h and w and d)


def resolve_effective_dimensions(
    product: Product, batch: Optional[ProductBatch] = None
) -> Optional[ResolvedDimensions]:
    """
    Resolve effective dimensions from batch/product with priority:
    1. Batch packaging dims (if all 3 present)
    2. Product packaging dims (if all 3 present)
    3. Batch product dims (if all 3 present)
    4. Product product dims (if all 3 present)

    Axes are never mixed across sets.
    """
    candidates = []
    if batch is not None:
        candidates.append(
            (
                batch.packaging_height_cm,
                batch.packaging_width_cm,
                batch.packaging_depth_cm,
                "packaging",
            )
        )
    candidates.append(
        (
            product.packaging_height_cm,
            product.packaging_width_cm,
            product.packaging_depth_cm,
            "packaging",
        )
    )
    if batch is not None:
        candidates.append(
            (
                batch.product_height_cm,
                batch.product_width_cm,
                batch.product_depth_cm,
                "product",
            )
        )
    candidates.append(
        (
            product.product_height_cm,
            product.product_width_cm,
            product.product_depth_cm,
            "product",
        )
    )

    for h, w, d, source in candidates:
        if _complete(h, w, d):
            return ResolvedDimensions(
                dimensions=Dimensions(height_cm=h, width_cm=w, depth_cm=d),
                source=source,
            )
    return None


def calculate_volume(
    product: Product, quantity: int, batch: Optional[ProductBatch] = None
) -> Optional[VolumeResult]:
    """
    Calculate volume for a given quantity of products/batches.
    Returns None if no complete dimension set is available.
    """
    resolved = resolve_effective_dimensions(product, batch)
    if resolved is None:
        return None

    unit_volume_m3 = resolved.dimensions.volume_cm3 / CM3_PER_M3
    return VolumeResult(
        unit_volume_m3=unit_volume_m3,
        total_volume_m3=unit_volume_m3 * quantity,
        source=resolved.source,
        dimensions=resolved.dimensions,
        quantity=quantity,
    )


def analyze_capacity(
    incoming_m3: float,
    location_capacity_m3: Optional[float] = None,
    current_used_m3: Optional[float] = None,
) -> Optional[CapacityAnalysis]:
    """
    Analyze whether incoming volume fits within a storage location's capacity.

    `current_used_m3` may be None when the location does not track usage; it is
    then treated as empty. Locations without a positive capacity report
    "unknown".
    """
    if not location_capacity_m3 or location_capacity_m3 <= 0:
        return CapacityAnalysis(
            status="unknown",
            fill_percent_after=0.0,
            remaining_after_m3=0.0,
            location_capacity_m3=0.0,
        )

    used = current_used_m3 if current_used_m3 is not None else 0.0
    after_m3 = used + incoming_m3
    fill_percent_after = (after_m3 / location_capacity_m3) * 100

    status: CapacityStatus
    if fill_percent_after > CAPACITY_FULL_PCT:
        status = "over_capacity"
    elif fill_percent_after >= CAPACITY_WARNING_PCT:
        status = "warning"
    else:
        status = "ok"

    return CapacityAnalysis(
        status=status,
        fill_percent_after=fill_percent_after,
        remaining_after_m3=location_capacity_m3 - after_m3,
        location_capacity_m3=location_capacity_m3,
    )


def format_volume_m3(value: float) -> str:
    """Format m³ value for display, with more decimals for small values."""
    if value == 0:
        return "0 m³"
    if value < 0.001:
        return f"{value:.6f} m³"
    if value < 0.1:
        return f"{value:.4f} m³"
    return f"{value:.2f} m³"


__all__ = [
    "resolve_effective_dimensions",
    "calculate_volume",
    "analyze_capacity",
    "format_volume_m3",
]
