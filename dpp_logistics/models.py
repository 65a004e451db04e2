# dpp_logistics/models.py
"""
Core datamodels for dpp_logistics.

This module provides:
- Dataclass-based core models used by the calculation modules (value objects
  and the product/batch input records supplied by the data-access layer).
- Pydantic models used for API input/output (serialization & validation).
- Small conversion helpers between dataclasses and pydantic models.

Keep dataclasses free of framework-specific dependencies so they can be used
directly by the calculators. Pydantic models are thin wrappers for
validation/IO when exposing the functionality through FastAPI.

Units: lengths in centimeters, weights of single units in grams, aggregated
weights in kilograms, volumes in cubic meters (cartons in liters).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

DimensionSource = Literal["packaging", "product"]
ContainerType = Literal["20ft", "40ft", "40ft_hc"]
CapacityStatus = Literal["ok", "warning", "over_capacity", "unknown"]

# ----------------------------
# Dataclass input records
# ----------------------------


@dataclass
class Product:
    """
    Product master record as delivered by the data-access layer.

    Two independent dimension sets may be present: the shipping packaging
    (`packaging_*`) and the bare product (`product_*`). A set is only usable
    when all three axes are filled in. `gross_weight` is in grams.
    """

    id: str
    name: str = ""
    packaging_height_cm: Optional[float] = None
    packaging_width_cm: Optional[float] = None
    packaging_depth_cm: Optional[float] = None
    product_height_cm: Optional[float] = None
    product_width_cm: Optional[float] = None
    product_depth_cm: Optional[float] = None
    gross_weight: Optional[float] = None


@dataclass
class ProductBatch:
    """
    Batch record. Any field set here overrides the product-level value of the
    same kind (see `volume.resolve_effective_dimensions`).
    """

    id: str
    batch_number: str = ""
    quantity: Optional[int] = None
    packaging_height_cm: Optional[float] = None
    packaging_width_cm: Optional[float] = None
    packaging_depth_cm: Optional[float] = None
    product_height_cm: Optional[float] = None
    product_width_cm: Optional[float] = None
    product_depth_cm: Optional[float] = None
    gross_weight: Optional[float] = None


# ----------------------------
# Dataclass value objects
# ----------------------------


@dataclass(frozen=True)
class Dimensions:
    """Bounding box of a single unit."""

    height_cm: float
    width_cm: float
    depth_cm: float

    @property
    def volume_cm3(self) -> float:
        return self.height_cm * self.width_cm * self.depth_cm


@dataclass(frozen=True)
class ResolvedDimensions:
    dimensions: Dimensions
    source: DimensionSource


@dataclass
class VolumeResult:
    unit_volume_m3: float
    total_volume_m3: float
    source: DimensionSource
    dimensions: Dimensions
    quantity: int


@dataclass
class CapacityAnalysis:
    """
    Fill state of a storage location after adding an incoming volume.

    `remaining_after_m3` turns negative when the location would overflow.
    """

    status: CapacityStatus
    fill_percent_after: float
    remaining_after_m3: float
    location_capacity_m3: float


# ----------------------------
# Static reference specs
# ----------------------------


@dataclass(frozen=True)
class PalletSpec:
    length_cm: float
    width_cm: float
    height_cm: float
    max_stack_height_cm: float
    max_weight_kg: float
    area_m2: float
    label: str


@dataclass(frozen=True)
class ContainerSpec:
    label: str
    inner_length_cm: float
    inner_width_cm: float
    inner_height_cm: float
    usable_volume_m3: float
    max_payload_kg: float
    pallet_spots: int


@dataclass(frozen=True)
class ShippingCartonSpec:
    """
    Standard shipping carton.

    - id: short size code ("xs" ... "xxl")
    - inner_length_cm, inner_width_cm, inner_height_cm: usable interior
    - volume_liters: nominal interior volume
    - pallet_module: fraction of a Euro pallet footprint covered by the
      carton ("1/4" etc.), "—" for cartons that do not tile the pallet
    """

    id: str
    inner_length_cm: float
    inner_width_cm: float
    inner_height_cm: float
    volume_liters: float
    pallet_module: str

    @property
    def label(self) -> str:
        return f"{self.inner_length_cm:g}×{self.inner_width_cm:g}×{self.inner_height_cm:g}"


@dataclass(frozen=True)
class CarrierParcelLimit:
    """
    Parcel limits of one carrier service. Length/width/height are entered
    largest-first and compared against the carton's sorted dimensions.
    """

    id: str
    label: str
    max_length_cm: float
    max_width_cm: float
    max_height_cm: float
    max_girth_cm: float
    max_weight_kg: float


# ----------------------------
# Dataclass calculation results
# ----------------------------


@dataclass
class PalletCalculation:
    units_per_layer: int
    layers_per_pallet: int
    units_per_pallet: int
    pallets_needed: int
    last_pallet_units: int
    last_pallet_fill_pct: float
    total_pallet_weight_kg: Optional[float]
    weight_limited: bool
    layout_desc: str
    layer_columns: Tuple[int, int] = (0, 0)
    unit_footprint_cm: Tuple[float, float] = (0.0, 0.0)
    unit_height_cm: float = 0.0


@dataclass
class ContainerCalculation:
    container_type: ContainerType
    container_label: str
    pallets_per_container: int
    containers_needed: int
    last_container_pallets: int
    last_container_fill_pct: float
    fill_percent_volume: float
    fill_percent_weight: Optional[float]
    total_weight_kg: Optional[float]


@dataclass
class CarrierComplianceResult:
    carrier_id: str
    carrier_label: str
    fits: bool
    reason: Optional[str] = None


@dataclass
class CartonFitResult:
    carton: ShippingCartonSpec
    units_per_carton: int
    cartons_needed: int
    last_carton_units: int
    last_carton_fill_pct: float
    carton_weight_kg: Optional[float]
    layout_desc: str
    carrier_compliance: List[CarrierComplianceResult] = field(default_factory=list)


@dataclass
class BatchSpaceSummary:
    """
    Consolidated space report for one (product, batch, quantity) request.

    Built fresh on every call; `warnings` collects degraded-but-computable
    conditions such as missing weight data.
    """

    volume: VolumeResult
    dimensions: Dimensions
    dimension_source: DimensionSource
    pallet: PalletCalculation
    containers: Dict[ContainerType, ContainerCalculation]
    cartons: List[CartonFitResult]
    total_weight_kg: Optional[float]
    unit_weight_grams: Optional[float]
    warnings: List[str] = field(default_factory=list)


# ----------------------------
# Pydantic models for API surface
# ----------------------------

# Input models (Create / Request)


class DimensionsCreate(BaseModel):
    height_cm: float = Field(..., gt=0)
    width_cm: float = Field(..., gt=0)
    depth_cm: float = Field(..., gt=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"height_cm": 20.0, "width_cm": 30.0, "depth_cm": 40.0}
        }
    )


class ProductCreate(BaseModel):
    id: str = Field(..., description="Product id")
    name: str = Field("")
    packaging_height_cm: Optional[float] = Field(None, ge=0)
    packaging_width_cm: Optional[float] = Field(None, ge=0)
    packaging_depth_cm: Optional[float] = Field(None, ge=0)
    product_height_cm: Optional[float] = Field(None, ge=0)
    product_width_cm: Optional[float] = Field(None, ge=0)
    product_depth_cm: Optional[float] = Field(None, ge=0)
    gross_weight: Optional[float] = Field(None, ge=0, description="Grams per unit")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "PRD-1",
                "name": "Espresso machine",
                "packaging_height_cm": 20.0,
                "packaging_width_cm": 30.0,
                "packaging_depth_cm": 40.0,
                "gross_weight": 2000.0,
            }
        }
    )


class ProductBatchCreate(BaseModel):
    id: str = Field(..., description="Batch id")
    batch_number: str = Field("")
    quantity: Optional[int] = Field(None, ge=0)
    packaging_height_cm: Optional[float] = Field(None, ge=0)
    packaging_width_cm: Optional[float] = Field(None, ge=0)
    packaging_depth_cm: Optional[float] = Field(None, ge=0)
    product_height_cm: Optional[float] = Field(None, ge=0)
    product_width_cm: Optional[float] = Field(None, ge=0)
    product_depth_cm: Optional[float] = Field(None, ge=0)
    gross_weight: Optional[float] = Field(None, ge=0, description="Grams per unit")


class VolumeRequest(BaseModel):
    product: ProductCreate
    batch: Optional[ProductBatchCreate] = None
    quantity: int = Field(..., gt=0)


class CapacityRequest(BaseModel):
    incoming_m3: float = Field(..., ge=0)
    location_capacity_m3: Optional[float] = None
    current_used_m3: Optional[float] = Field(None, ge=0)


class UnitFitRequest(BaseModel):
    dimensions: DimensionsCreate
    quantity: int = Field(..., gt=0)
    unit_weight_grams: Optional[float] = Field(None, ge=0)


class SpaceRequest(BaseModel):
    product: ProductCreate
    batch: Optional[ProductBatchCreate] = None
    quantity: int = Field(..., description="Units to ship; <= 0 cannot be computed")


# Output models (Read / Response)


class DimensionsRead(BaseModel):
    height_cm: float
    width_cm: float
    depth_cm: float


class VolumeResultRead(BaseModel):
    unit_volume_m3: float
    total_volume_m3: float
    source: DimensionSource
    dimensions: DimensionsRead
    quantity: int


class CapacityAnalysisRead(BaseModel):
    status: CapacityStatus
    fill_percent_after: float
    remaining_after_m3: float
    location_capacity_m3: float


class PalletCalculationRead(BaseModel):
    units_per_layer: int
    layers_per_pallet: int
    units_per_pallet: int
    pallets_needed: int
    last_pallet_units: int
    last_pallet_fill_pct: float
    total_pallet_weight_kg: Optional[float]
    weight_limited: bool
    layout_desc: str


class ContainerCalculationRead(BaseModel):
    container_type: ContainerType
    container_label: str
    pallets_per_container: int
    containers_needed: int
    last_container_pallets: int
    last_container_fill_pct: float
    fill_percent_volume: float
    fill_percent_weight: Optional[float]
    total_weight_kg: Optional[float]


class CarrierComplianceRead(BaseModel):
    carrier_id: str
    carrier_label: str
    fits: bool
    reason: Optional[str]


class CartonFitRead(BaseModel):
    carton_id: str
    carton_label: str
    inner_length_cm: float
    inner_width_cm: float
    inner_height_cm: float
    volume_liters: float
    pallet_module: str
    units_per_carton: int
    cartons_needed: int
    last_carton_units: int
    last_carton_fill_pct: float
    carton_weight_kg: Optional[float]
    layout_desc: str
    carrier_compliance: List[CarrierComplianceRead]


class CartonFitResponse(BaseModel):
    cartons: List[CartonFitRead]
    recommended_carton_id: Optional[str] = None


class BatchSpaceSummaryRead(BaseModel):
    volume: VolumeResultRead
    dimensions: DimensionsRead
    dimension_source: DimensionSource
    pallet: PalletCalculationRead
    containers: Dict[ContainerType, ContainerCalculationRead]
    cartons: List[CartonFitRead]
    recommended_carton_id: Optional[str] = None
    total_weight_kg: Optional[float]
    unit_weight_grams: Optional[float]
    warnings: List[str]


# ----------------------------
# Conversion helpers
# ----------------------------


def dimensionscreate_to_dataclass(dc: DimensionsCreate) -> Dimensions:
    """Convert DimensionsCreate (pydantic) to Dimensions dataclass."""
    return Dimensions(
        height_cm=dc.height_cm, width_cm=dc.width_cm, depth_cm=dc.depth_cm
    )


def productcreate_to_dataclass(pc: ProductCreate) -> Product:
    """Convert ProductCreate (pydantic) to Product dataclass."""
    return Product(
        id=pc.id,
        name=pc.name,
        packaging_height_cm=pc.packaging_height_cm,
        packaging_width_cm=pc.packaging_width_cm,
        packaging_depth_cm=pc.packaging_depth_cm,
        product_height_cm=pc.product_height_cm,
        product_width_cm=pc.product_width_cm,
        product_depth_cm=pc.product_depth_cm,
        gross_weight=pc.gross_weight,
    )


def batchcreate_to_dataclass(bc: Optional[ProductBatchCreate]) -> Optional[ProductBatch]:
    """Convert ProductBatchCreate (pydantic) to ProductBatch dataclass."""
    if bc is None:
        return None
    return ProductBatch(
        id=bc.id,
        batch_number=bc.batch_number,
        quantity=bc.quantity,
        packaging_height_cm=bc.packaging_height_cm,
        packaging_width_cm=bc.packaging_width_cm,
        packaging_depth_cm=bc.packaging_depth_cm,
        product_height_cm=bc.product_height_cm,
        product_width_cm=bc.product_width_cm,
        product_depth_cm=bc.product_depth_cm,
        gross_weight=bc.gross_weight,
    )


def dimensions_from_dataclass(d: Dimensions) -> DimensionsRead:
    return DimensionsRead(height_cm=d.height_cm, width_cm=d.width_cm, depth_cm=d.depth_cm)


def volume_from_dataclass(v: VolumeResult) -> VolumeResultRead:
    return VolumeResultRead(
        unit_volume_m3=v.unit_volume_m3,
        total_volume_m3=v.total_volume_m3,
        source=v.source,
        dimensions=dimensions_from_dataclass(v.dimensions),
        quantity=v.quantity,
    )


def capacity_from_dataclass(c: CapacityAnalysis) -> CapacityAnalysisRead:
    return CapacityAnalysisRead(
        status=c.status,
        fill_percent_after=c.fill_percent_after,
        remaining_after_m3=c.remaining_after_m3,
        location_capacity_m3=c.location_capacity_m3,
    )


def pallet_from_dataclass(p: PalletCalculation) -> PalletCalculationRead:
    return PalletCalculationRead(
        units_per_layer=p.units_per_layer,
        layers_per_pallet=p.layers_per_pallet,
        units_per_pallet=p.units_per_pallet,
        pallets_needed=p.pallets_needed,
        last_pallet_units=p.last_pallet_units,
        last_pallet_fill_pct=p.last_pallet_fill_pct,
        total_pallet_weight_kg=p.total_pallet_weight_kg,
        weight_limited=p.weight_limited,
        layout_desc=p.layout_desc,
    )


def container_from_dataclass(c: ContainerCalculation) -> ContainerCalculationRead:
    return ContainerCalculationRead(
        container_type=c.container_type,
        container_label=c.container_label,
        pallets_per_container=c.pallets_per_container,
        containers_needed=c.containers_needed,
        last_container_pallets=c.last_container_pallets,
        last_container_fill_pct=c.last_container_fill_pct,
        fill_percent_volume=c.fill_percent_volume,
        fill_percent_weight=c.fill_percent_weight,
        total_weight_kg=c.total_weight_kg,
    )


def carton_fit_from_dataclass(cf: CartonFitResult) -> CartonFitRead:
    """Flatten a CartonFitResult (carton spec + fit numbers) into CartonFitRead."""
    return CartonFitRead(
        carton_id=cf.carton.id,
        carton_label=cf.carton.label,
        inner_length_cm=cf.carton.inner_length_cm,
        inner_width_cm=cf.carton.inner_width_cm,
        inner_height_cm=cf.carton.inner_height_cm,
        volume_liters=cf.carton.volume_liters,
        pallet_module=cf.carton.pallet_module,
        units_per_carton=cf.units_per_carton,
        cartons_needed=cf.cartons_needed,
        last_carton_units=cf.last_carton_units,
        last_carton_fill_pct=cf.last_carton_fill_pct,
        carton_weight_kg=cf.carton_weight_kg,
        layout_desc=cf.layout_desc,
        carrier_compliance=[
            CarrierComplianceRead(
                carrier_id=cc.carrier_id,
                carrier_label=cc.carrier_label,
                fits=cc.fits,
                reason=cc.reason,
            )
            for cc in cf.carrier_compliance
        ],
    )


def space_summary_from_dataclass(
    s: BatchSpaceSummary, recommended_carton_id: Optional[str] = None
) -> BatchSpaceSummaryRead:
    """Convenience helper to create a Pydantic BatchSpaceSummaryRead from dataclass outputs."""
    return BatchSpaceSummaryRead(
        volume=volume_from_dataclass(s.volume),
        dimensions=dimensions_from_dataclass(s.dimensions),
        dimension_source=s.dimension_source,
        pallet=pallet_from_dataclass(s.pallet),
        containers={k: container_from_dataclass(c) for k, c in s.containers.items()},
        cartons=[carton_fit_from_dataclass(cf) for cf in s.cartons],
        recommended_carton_id=recommended_carton_id,
        total_weight_kg=s.total_weight_kg,
        unit_weight_grams=s.unit_weight_grams,
        warnings=list(s.warnings),
    )


# Expose minimal public API from this module
__all__ = [
    "DimensionSource",
    "ContainerType",
    "CapacityStatus",
    "Product",
    "ProductBatch",
    "Dimensions",
    "ResolvedDimensions",
    "VolumeResult",
    "CapacityAnalysis",
    "PalletSpec",
    "ContainerSpec",
    "ShippingCartonSpec",
    "CarrierParcelLimit",
    "PalletCalculation",
    "ContainerCalculation",
    "CarrierComplianceResult",
    "CartonFitResult",
    "BatchSpaceSummary",
    "DimensionsCreate",
    "ProductCreate",
    "ProductBatchCreate",
    "VolumeRequest",
    "CapacityRequest",
    "UnitFitRequest",
    "SpaceRequest",
    "VolumeResultRead",
    "CapacityAnalysisRead",
    "PalletCalculationRead",
    "ContainerCalculationRead",
    "CartonFitRead",
    "CartonFitResponse",
    "BatchSpaceSummaryRead",
    "productcreate_to_dataclass",
    "batchcreate_to_dataclass",
    "dimensionscreate_to_dataclass",
    "space_summary_from_dataclass",
]
