"""
FastAPI application exposing the logistics space-fitting calculations.

This module provides a small, well-documented API surface built on top of the
pure calculation modules in dpp_logistics.

Endpoints:
- GET /health
- GET / (service info / version)
- GET /catalog     -> pallet, containers, cartons and carrier limits
- POST /volume     -> unit/total volume for a product (batch)
- POST /capacity   -> storage location fill state after an incoming delivery
- POST /pallet     -> EUR 1 pallet fit for raw unit dimensions
- POST /cartons    -> standard carton fits + carrier compliance
- POST /space      -> full batch space summary

Notes:
- The API uses the Pydantic request/response models defined in `dpp_logistics.models`.
- The computational core stays pure and never logs; "cannot compute" (None)
  results from the core are answered with 422.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__ as PACKAGE_VERSION
from . import logistics as logistics_core
from . import volume as volume_core
from .catalog import CARRIER_LIMITS, CONTAINERS, EURO_PALLET, SHIPPING_CARTONS
from .models import (
    BatchSpaceSummaryRead,
    CapacityAnalysisRead,
    CapacityRequest,
    CartonFitResponse,
    PalletCalculationRead,
    SpaceRequest,
    UnitFitRequest,
    VolumeRequest,
    VolumeResultRead,
    batchcreate_to_dataclass,
    capacity_from_dataclass,
    carton_fit_from_dataclass,
    dimensionscreate_to_dataclass,
    pallet_from_dataclass,
    productcreate_to_dataclass,
    space_summary_from_dataclass,
    volume_from_dataclass,
)

logger = logging.getLogger("dpp_logistics")
logging.basicConfig(level=logging.INFO)

app = FastAPI(
    title="dpp_logistics - pallet, container and carton fitting",
    version=PACKAGE_VERSION,
    description="API wrapper around the logistics space-fitting calculations.",
)

# Allow cross-origin calls for common dev scenarios (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Change to your allowed origins in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------
# Health & info endpoints
# ---------------------------


@app.get("/", summary="Service info")
async def root() -> Dict[str, Any]:
    """
    Basic service information and version.
    """
    return {"service": "dpp_logistics", "version": PACKAGE_VERSION}


@app.get("/health", summary="Health check")
async def health() -> Dict[str, str]:
    """
    Simple health check endpoint.
    """
    return {"status": "ok"}


@app.get("/catalog", summary="Logistics reference data")
async def catalog() -> Dict[str, Any]:
    """
    Static reference data used by every calculation.
    """
    return {
        "pallet": asdict(EURO_PALLET),
        "containers": {k: asdict(v) for k, v in CONTAINERS.items()},
        "cartons": [dict(asdict(c), label=c.label) for c in SHIPPING_CARTONS],
        "carriers": [asdict(c) for c in CARRIER_LIMITS],
    }


# ---------------------------
# Calculation endpoints
# ---------------------------


@app.post("/volume", response_model=VolumeResultRead, summary="Volume of a product (batch)")
async def volume(request: VolumeRequest) -> VolumeResultRead:
    """
    Unit and total volume from the highest-priority complete dimension set.
    """
    product = productcreate_to_dataclass(request.product)
    batch = batchcreate_to_dataclass(request.batch)

    logger.info(
        "volume called: product=%s batch=%s qty=%d",
        product.id,
        batch.id if batch else None,
        request.quantity,
    )

    result = volume_core.calculate_volume(product, request.quantity, batch)
    if result is None:
        raise HTTPException(
            status_code=422, detail="No complete dimension set for product or batch."
        )
    return volume_from_dataclass(result)


@app.post("/capacity", response_model=CapacityAnalysisRead, summary="Storage location fill check")
async def capacity(request: CapacityRequest) -> CapacityAnalysisRead:
    """
    Fill state of a storage location after adding `incoming_m3`.
    """
    logger.info(
        "capacity called: incoming=%s capacity=%s used=%s",
        request.incoming_m3,
        request.location_capacity_m3,
        request.current_used_m3,
    )
    analysis = volume_core.analyze_capacity(
        request.incoming_m3, request.location_capacity_m3, request.current_used_m3
    )
    if analysis is None:
        raise HTTPException(status_code=422, detail="Capacity cannot be analyzed.")
    return capacity_from_dataclass(analysis)


@app.post("/pallet", response_model=PalletCalculationRead, summary="EUR 1 pallet fit")
async def pallet(request: UnitFitRequest) -> PalletCalculationRead:
    """
    Layer layout, units per pallet and pallets needed for raw unit dimensions.
    """
    dims = dimensionscreate_to_dataclass(request.dimensions)
    logger.info(
        "pallet called: dims=%s qty=%d weight_g=%s",
        dims,
        request.quantity,
        request.unit_weight_grams,
    )
    result = logistics_core.calculate_pallet_fit(
        dims, request.quantity, request.unit_weight_grams
    )
    return pallet_from_dataclass(result)


@app.post("/cartons", response_model=CartonFitResponse, summary="Standard carton fits")
async def cartons(request: UnitFitRequest) -> CartonFitResponse:
    """
    Every standard carton that holds at least one unit, fewest cartons first,
    with per-carrier compliance and the recommended (DHL-compliant) carton.
    """
    dims = dimensionscreate_to_dataclass(request.dimensions)
    logger.info(
        "cartons called: dims=%s qty=%d weight_g=%s",
        dims,
        request.quantity,
        request.unit_weight_grams,
    )
    fits = logistics_core.calculate_carton_fit(
        dims, request.quantity, request.unit_weight_grams
    )
    recommended = logistics_core.recommend_carton(fits)
    return CartonFitResponse(
        cartons=[carton_fit_from_dataclass(f) for f in fits],
        recommended_carton_id=recommended.carton.id if recommended else None,
    )


@app.post("/space", response_model=BatchSpaceSummaryRead, summary="Batch space summary")
async def space(request: SpaceRequest) -> BatchSpaceSummaryRead:
    """
    Volume, pallets, containers and cartons for a product (batch) quantity.

    Response:
    - BatchSpaceSummaryRead; `warnings` lists degraded inputs such as
      missing weight data.
    """
    product = productcreate_to_dataclass(request.product)
    batch = batchcreate_to_dataclass(request.batch)

    logger.info(
        "space called: product=%s batch=%s qty=%d",
        product.id,
        batch.id if batch else None,
        request.quantity,
    )

    summary = logistics_core.calculate_batch_space(product, batch, request.quantity)
    if summary is None:
        raise HTTPException(
            status_code=422,
            detail="Space cannot be calculated: quantity must be > 0 and a complete dimension set is required.",
        )

    recommended = logistics_core.recommend_carton(summary.cartons)
    return space_summary_from_dataclass(
        summary, recommended_carton_id=recommended.carton.id if recommended else None
    )


# ---------------------------
# Exception handlers & utilities
# ---------------------------


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Basic generic handler to ensure JSON responses for unexpected errors.
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
