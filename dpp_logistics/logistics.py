# dpp_logistics/logistics.py
"""
Warehouse logistics calculations.

This module provides the space-fitting pipeline used by the API:
- pallet fitting onto a EUR 1 pallet: calculate_pallet_fit
- pallet-to-container fitting: calculate_container_fit
- standard carton fitting and carrier checks: calculate_carton_fit,
  check_carrier_compliance, recommend_carton
- batch orchestration: calculate_batch_space
- summary printing helpers

Everything is an estimate built from axis-aligned layer tiling with two
footprint orientations (width/depth swapped, height always up). This is not a
3D bin-packing solver. All functions are pure and operate on the dataclasses
defined in `dpp_logistics.models`.
"""

from __future__ import annotations

from math import ceil, floor
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .catalog import (
    CARRIER_LIMITS,
    CARTON_TARE_KG,
    CONTAINER_TYPES,
    CONTAINERS,
    EURO_PALLET,
    SHIPPING_CARTONS,
)
from .models import (
    BatchSpaceSummary,
    CarrierComplianceResult,
    CarrierParcelLimit,
    CartonFitResult,
    ContainerCalculation,
    ContainerType,
    Dimensions,
    PalletCalculation,
    Product,
    ProductBatch,
    ShippingCartonSpec,
)
from .volume import calculate_volume, format_volume_m3

# ----------------------------
# Geometry helpers
# ----------------------------


def footprint_orientations(dims: Dimensions) -> List[Tuple[float, float]]:
    """
    Footprints (along length, along width) tried on a pallet or carton floor.
    The first entry wins ties.
    """
    return [(dims.width_cm, dims.depth_cm), (dims.depth_cm, dims.width_cm)]


def _columns(
    area_length: float, area_width: float, footprint: Tuple[float, float]
) -> Tuple[int, int]:
    fl, fw = footprint
    return floor(area_length / fl), floor(area_width / fw)


def _remainder_or_full(quantity: int, per_package: int) -> int:
    # an exact multiple means the last package is full, not empty
    return quantity % per_package or per_package


# ----------------------------
# Pallet calculation
# ----------------------------


def calculate_pallet_fit(
    dims: Dimensions, quantity: int, unit_weight_grams: Optional[float] = None
) -> PalletCalculation:
    """
    Units per EUR 1 pallet, layer layout and pallets needed for `quantity`.

    1) Tile the pallet deck in both footprint orientations, keep the better.
    2) Stack layers up to the max stack height.
    3) If the unit weight is known, drop layers until the pallet is under
       its max weight (never below one layer).
    """
    best_units = -1
    best_cols = (0, 0)
    best_footprint = (dims.width_cm, dims.depth_cm)
    for footprint in footprint_orientations(dims):
        cols = _columns(EURO_PALLET.length_cm, EURO_PALLET.width_cm, footprint)
        units = cols[0] * cols[1]
        if units > best_units:
            best_units, best_cols, best_footprint = units, cols, footprint

    # At least one unit per layer, even for units that overhang the deck
    units_per_layer = max(1, best_units)

    layers_per_pallet = max(1, floor(EURO_PALLET.max_stack_height_cm / dims.height_cm))
    units_per_pallet = units_per_layer * layers_per_pallet
    weight_limited = False

    if unit_weight_grams and unit_weight_grams > 0:
        max_units_by_weight = floor(EURO_PALLET.max_weight_kg * 1000 / unit_weight_grams)
        if max_units_by_weight < units_per_pallet:
            layers_per_pallet = max(1, max_units_by_weight // units_per_layer)
            units_per_pallet = units_per_layer * layers_per_pallet
            weight_limited = True

    pallets_needed = ceil(quantity / units_per_pallet)
    last_pallet_units = _remainder_or_full(quantity, units_per_pallet)
    last_pallet_fill_pct = last_pallet_units / units_per_pallet * 100

    total_pallet_weight_kg = (
        unit_weight_grams * quantity / 1000 if unit_weight_grams else None
    )

    return PalletCalculation(
        units_per_layer=units_per_layer,
        layers_per_pallet=layers_per_pallet,
        units_per_pallet=units_per_pallet,
        pallets_needed=pallets_needed,
        last_pallet_units=last_pallet_units,
        last_pallet_fill_pct=last_pallet_fill_pct,
        total_pallet_weight_kg=total_pallet_weight_kg,
        weight_limited=weight_limited,
        layout_desc=f"{best_cols[0]}×{best_cols[1]} × {layers_per_pallet}",
        layer_columns=best_cols,
        unit_footprint_cm=best_footprint,
        unit_height_cm=dims.height_cm,
    )


# ----------------------------
# Container calculation
# ----------------------------


def calculate_container_fit(
    total_volume_m3: float,
    pallets_needed: int,
    total_weight_kg: Optional[float] = None,
    container_type: ContainerType = "40ft",
) -> ContainerCalculation:
    """
    Pallets per container (spot count, reduced by payload when the weight is
    known), containers needed and fill percentages.

    Volume and weight are spread evenly over all containers; both fill
    percentages are capped at 100.
    """
    spec = CONTAINERS[container_type]

    pallets_per_container = spec.pallet_spots

    if total_weight_kg is not None and pallets_needed > 0:
        weight_per_pallet = total_weight_kg / pallets_needed
        if weight_per_pallet > 0:
            max_pallets_by_weight = floor(spec.max_payload_kg / weight_per_pallet)
            if max_pallets_by_weight < pallets_per_container:
                pallets_per_container = max(1, max_pallets_by_weight)

    containers_needed = ceil(pallets_needed / pallets_per_container)
    last_container_pallets = _remainder_or_full(pallets_needed, pallets_per_container)
    last_container_fill_pct = last_container_pallets / pallets_per_container * 100

    volume_per_container = (
        total_volume_m3 / containers_needed if containers_needed > 0 else 0.0
    )
    fill_percent_volume = min(volume_per_container / spec.usable_volume_m3 * 100, 100.0)

    fill_percent_weight: Optional[float] = None
    if total_weight_kg is not None and containers_needed > 0:
        fill_percent_weight = min(
            total_weight_kg / containers_needed / spec.max_payload_kg * 100, 100.0
        )

    return ContainerCalculation(
        container_type=container_type,
        container_label=spec.label,
        pallets_per_container=pallets_per_container,
        containers_needed=containers_needed,
        last_container_pallets=last_container_pallets,
        last_container_fill_pct=last_container_fill_pct,
        fill_percent_volume=fill_percent_volume,
        fill_percent_weight=fill_percent_weight,
        total_weight_kg=total_weight_kg,
    )


# ----------------------------
# Carton calculation
# ----------------------------


def check_carrier_compliance(
    carton: ShippingCartonSpec,
    carton_weight_kg: Optional[float] = None,
    carriers: Iterable[CarrierParcelLimit] = CARRIER_LIMITS,
) -> List[CarrierComplianceResult]:
    """
    Check one carton against every carrier's parcel limits.

    The carton's dimensions are sorted largest-first and compared positionally
    with the carrier's max length/width/height. Girth is
    length + 2 × width + 2 × height in the carton's own axis order. The first
    violated limit (length, width, height, girth, weight) becomes the reason.
    """
    length, width, height = sorted(
        (carton.inner_length_cm, carton.inner_width_cm, carton.inner_height_cm),
        reverse=True,
    )
    girth = carton.inner_length_cm + 2 * carton.inner_width_cm + 2 * carton.inner_height_cm

    results: List[CarrierComplianceResult] = []
    for carrier in carriers:
        reason: Optional[str] = None
        if length > carrier.max_length_cm:
            reason = f"Length {length:g} cm > {carrier.max_length_cm:g} cm max"
        elif width > carrier.max_width_cm:
            reason = f"Width {width:g} cm > {carrier.max_width_cm:g} cm max"
        elif height > carrier.max_height_cm:
            reason = f"Height {height:g} cm > {carrier.max_height_cm:g} cm max"
        elif girth > carrier.max_girth_cm:
            reason = f"Girth {girth:g} cm > {carrier.max_girth_cm:g} cm max"
        elif carton_weight_kg is not None and carton_weight_kg > carrier.max_weight_kg:
            reason = f"Weight {carton_weight_kg:.1f} kg > {carrier.max_weight_kg:g} kg max"

        results.append(
            CarrierComplianceResult(
                carrier_id=carrier.id,
                carrier_label=carrier.label,
                fits=reason is None,
                reason=reason,
            )
        )
    return results


def calculate_carton_fit(
    unit_dims: Dimensions,
    quantity: int,
    unit_weight_grams: Optional[float] = None,
    cartons: Sequence[ShippingCartonSpec] = SHIPPING_CARTONS,
) -> List[CartonFitResult]:
    """
    Fit the unit into every standard carton and check carrier limits.

    Cartons that cannot hold a single unit are left out. The result is sorted
    by cartons needed, fewest first (stable, so ties keep catalog order).
    """
    results: List[CartonFitResult] = []

    for carton in cartons:
        layers = floor(carton.inner_height_cm / unit_dims.height_cm)
        units_per_carton = 0
        layout_desc = ""
        for footprint in footprint_orientations(unit_dims):
            cols = _columns(carton.inner_length_cm, carton.inner_width_cm, footprint)
            units = cols[0] * cols[1] * layers
            if units > units_per_carton:
                units_per_carton = units
                layout_desc = f"{cols[0]}×{cols[1]} × {layers}"

        if units_per_carton < 1:
            continue

        cartons_needed = ceil(quantity / units_per_carton)
        last_carton_units = _remainder_or_full(quantity, units_per_carton)
        last_carton_fill_pct = last_carton_units / units_per_carton * 100

        carton_weight_kg = (
            units_per_carton * unit_weight_grams / 1000 + CARTON_TARE_KG
            if unit_weight_grams
            else None
        )

        results.append(
            CartonFitResult(
                carton=carton,
                units_per_carton=units_per_carton,
                cartons_needed=cartons_needed,
                last_carton_units=last_carton_units,
                last_carton_fill_pct=last_carton_fill_pct,
                carton_weight_kg=carton_weight_kg,
                layout_desc=layout_desc,
                carrier_compliance=check_carrier_compliance(carton, carton_weight_kg),
            )
        )

    results.sort(key=lambda r: r.cartons_needed)
    return results


def recommend_carton(
    cartons: List[CartonFitResult], carrier_id: str = "dhl"
) -> Optional[CartonFitResult]:
    """
    First carton the given carrier accepts, else the most space-efficient one.
    Expects the list in the order returned by `calculate_carton_fit`.
    """
    for fit in cartons:
        if any(cc.carrier_id == carrier_id and cc.fits for cc in fit.carrier_compliance):
            return fit
    return cartons[0] if cartons else None


# ----------------------------
# Batch space summary
# ----------------------------


def calculate_batch_space(
    product: Product, batch: Optional[ProductBatch], quantity: int
) -> Optional[BatchSpaceSummary]:
    """
    Full space report for `quantity` units of a product (batch).

    Returns None for quantity <= 0 or when no complete dimension set exists.
    Missing weight data does not stop the calculation: it is reported in
    `warnings` and every weight-based figure becomes None.
    """
    if quantity <= 0:
        return None

    volume = calculate_volume(product, quantity, batch)
    if volume is None:
        return None

    warnings: List[str] = []

    # batch gross weight > product gross weight > None
    unit_weight_grams = (
        batch.gross_weight
        if batch is not None and batch.gross_weight is not None
        else product.gross_weight
    )
    if not unit_weight_grams:
        warnings.append("No weight data")

    total_weight_kg = unit_weight_grams * quantity / 1000 if unit_weight_grams else None

    pallet = calculate_pallet_fit(volume.dimensions, quantity, unit_weight_grams)
    if pallet.weight_limited:
        warnings.append("Weight-limited")

    containers: Dict[ContainerType, ContainerCalculation] = {
        container_type: calculate_container_fit(
            volume.total_volume_m3,
            pallet.pallets_needed,
            total_weight_kg,
            container_type,
        )
        for container_type in CONTAINER_TYPES
    }

    cartons = calculate_carton_fit(volume.dimensions, quantity, unit_weight_grams)

    return BatchSpaceSummary(
        volume=volume,
        dimensions=volume.dimensions,
        dimension_source=volume.source,
        pallet=pallet,
        containers=containers,
        cartons=cartons,
        total_weight_kg=total_weight_kg,
        unit_weight_grams=unit_weight_grams,
        warnings=warnings,
    )


# ----------------------------
# Summary printing helpers
# ----------------------------


def print_space_summary(summary: BatchSpaceSummary, carrier_id: str = "dhl") -> None:
    """
    Print a human-friendly space report to stdout.
    """
    d = summary.dimensions
    print(f"Unit: {d.height_cm:g}x{d.width_cm:g}x{d.depth_cm:g} cm ({summary.dimension_source})")
    print(f" Unit volume: {format_volume_m3(summary.volume.unit_volume_m3)}")
    print(f" Total volume: {format_volume_m3(summary.volume.total_volume_m3)}")
    if summary.total_weight_kg is not None:
        print(f" Total weight: {summary.total_weight_kg:.1f} kg")
    print()

    p = summary.pallet
    print(f"Pallets ({EURO_PALLET.label})")
    print(f" Units per pallet: {p.units_per_pallet} ({p.layout_desc})")
    print(f" Pallets needed: {p.pallets_needed}")
    print(
        f" Last pallet: {p.last_pallet_units}/{p.units_per_pallet} "
        f"({p.last_pallet_fill_pct:.0f}%)"
    )
    print()

    print("Containers:")
    for c in summary.containers.values():
        weight = (
            f", weight {c.fill_percent_weight:.0f}%"
            if c.fill_percent_weight is not None
            else ""
        )
        print(
            f" - {c.container_label}: {c.containers_needed} x "
            f"({c.pallets_per_container} pallets), volume {c.fill_percent_volume:.0f}%{weight}"
        )
    print()

    if summary.cartons:
        recommended = recommend_carton(summary.cartons, carrier_id)
        print("Shipping cartons:")
        for fit in summary.cartons:
            marker = "*" if recommended is not None and fit.carton.id == recommended.carton.id else " "
            accepted = [cc.carrier_label for cc in fit.carrier_compliance if cc.fits]
            print(
                f" {marker} {fit.carton.label} cm: {fit.units_per_carton} per carton, "
                f"{fit.cartons_needed} cartons, carriers: {', '.join(accepted) or 'none'}"
            )
    else:
        print("No standard carton fits. Single item shipping required.")

    if summary.warnings:
        print()
        print("Warnings:")
        for w in summary.warnings:
            print(f" - {w}")


def print_carrier_reference() -> None:
    """
    Print the carrier limit and standard carton reference tables.
    """
    print("Carrier limits:")
    for c in CARRIER_LIMITS:
        print(
            f" - {c.label}: {c.max_length_cm:g}x{c.max_width_cm:g}x{c.max_height_cm:g} cm, "
            f"girth {c.max_girth_cm:g} cm, {c.max_weight_kg:g} kg"
        )
    print()
    print("Standard cartons:")
    for ct in SHIPPING_CARTONS:
        print(f" - {ct.id.upper()}: {ct.label} cm, {ct.volume_liters:g} L, pallet module {ct.pallet_module}")


__all__ = [
    "footprint_orientations",
    "calculate_pallet_fit",
    "calculate_container_fit",
    "check_carrier_compliance",
    "calculate_carton_fit",
    "recommend_carton",
    "calculate_batch_space",
    "print_space_summary",
    "print_carrier_reference",
]
