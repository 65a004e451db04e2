# dpp_logistics/catalog.py
"""
Static logistics reference data.

Everything here is fixed design data: the EUR 1 Euro-pallet, the three ISO
freight containers, the standard shipping carton range and the parcel limits
of the supported carriers. Nothing is loaded at runtime.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .models import (
    CarrierParcelLimit,
    ContainerSpec,
    ContainerType,
    PalletSpec,
    ShippingCartonSpec,
)

# ----------------------------
# Pallet
# ----------------------------

EURO_PALLET = PalletSpec(
    length_cm=120,
    width_cm=80,
    height_cm=15,
    max_stack_height_cm=180,
    max_weight_kg=1500,
    area_m2=0.96,
    label="EUR 1 (120×80)",
)

# ----------------------------
# Freight containers
# ----------------------------

CONTAINERS: Dict[ContainerType, ContainerSpec] = {
    "20ft": ContainerSpec(
        label="20' Standard",
        inner_length_cm=589,
        inner_width_cm=235,
        inner_height_cm=239,
        usable_volume_m3=33.2,
        max_payload_kg=21_770,
        pallet_spots=11,
    ),
    "40ft": ContainerSpec(
        label="40' Standard",
        inner_length_cm=1203,
        inner_width_cm=235,
        inner_height_cm=239,
        usable_volume_m3=67.7,
        max_payload_kg=26_680,
        pallet_spots=23,
    ),
    "40ft_hc": ContainerSpec(
        label="40' High Cube",
        inner_length_cm=1203,
        inner_width_cm=235,
        inner_height_cm=269,
        usable_volume_m3=76.3,
        max_payload_kg=26_480,
        pallet_spots=23,
    ),
}

CONTAINER_TYPES: Tuple[ContainerType, ...] = tuple(CONTAINERS)

# ----------------------------
# Shipping cartons
# ----------------------------

CARTON_TARE_KG = 0.5

SHIPPING_CARTONS: Tuple[ShippingCartonSpec, ...] = (
    ShippingCartonSpec("xs", 20, 15, 10, 3, "—"),
    ShippingCartonSpec("s", 30, 20, 15, 9, "1/16"),
    ShippingCartonSpec("m", 40, 30, 20, 24, "1/8"),
    ShippingCartonSpec("m_tall", 40, 30, 30, 36, "1/8"),
    ShippingCartonSpec("l", 60, 40, 30, 72, "1/4"),
    ShippingCartonSpec("l_tall", 60, 40, 40, 96, "1/4"),
    ShippingCartonSpec("xl", 80, 60, 40, 192, "1/2"),
    ShippingCartonSpec("xl_tall", 80, 60, 60, 288, "1/2"),
    ShippingCartonSpec("xxl", 120, 80, 60, 576, "1/1"),
)

# ----------------------------
# Carrier parcel limits
# ----------------------------

# Length >= width >= height for every entry: the compliance check compares
# them positionally against the carton's sorted dimensions.
CARRIER_LIMITS: Tuple[CarrierParcelLimit, ...] = (
    CarrierParcelLimit("dhl", "DHL", 120, 60, 60, 360, 31.5),
    CarrierParcelLimit("dpd", "DPD", 175, 100, 100, 300, 31.5),
    CarrierParcelLimit("gls", "GLS", 200, 80, 60, 300, 40),
    CarrierParcelLimit("hermes", "Hermes", 120, 60, 60, 300, 25),
    CarrierParcelLimit("dhl_express", "DHL Express", 120, 80, 80, 440, 70),
    CarrierParcelLimit("colissimo", "Colissimo", 150, 50, 50, 200, 30),
    CarrierParcelLimit("postnl", "PostNL", 176, 78, 58, 450, 31.5),
    CarrierParcelLimit("royal_mail", "Royal Mail", 61, 46, 46, 245, 20),
    CarrierParcelLimit("ups", "UPS", 274, 150, 150, 400, 70),
    CarrierParcelLimit("fedex", "FedEx", 274, 150, 150, 330, 68),
    CarrierParcelLimit("usps", "USPS", 274, 150, 150, 274, 31.7),
    CarrierParcelLimit("canada_post", "Canada Post", 200, 100, 100, 300, 30),
    CarrierParcelLimit("australia_post", "Australia Post", 105, 70, 70, 315, 22),
)

# ----------------------------
# Storage location fill thresholds (percent)
# ----------------------------

CAPACITY_WARNING_PCT = 80.0
CAPACITY_FULL_PCT = 100.0


__all__ = [
    "EURO_PALLET",
    "CONTAINERS",
    "CONTAINER_TYPES",
    "CARTON_TARE_KG",
    "SHIPPING_CARTONS",
    "CARRIER_LIMITS",
    "CAPACITY_WARNING_PCT",
    "CAPACITY_FULL_PCT",
]
