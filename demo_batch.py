from dpp_logistics.logistics import (
    calculate_batch_space,
    print_carrier_reference,
    print_space_summary,
)
from dpp_logistics.models import Product, ProductBatch
from dpp_logistics.plotter import visualize_pallets_with_buttons

if __name__ == "__main__":
    product = Product(
        "PRD-ESPRESSO",
        name="Espresso machine",
        packaging_height_cm=20,
        packaging_width_cm=30,
        packaging_depth_cm=40,
        gross_weight=2000,
    )

    # Batch overrides only the weight; dimensions come from the product packaging
    batch = ProductBatch("B-2024-07", batch_number="2024-07", quantity=500, gross_weight=2100)

    summary = calculate_batch_space(product, batch, batch.quantity)
    if summary is None:
        print("Space cannot be calculated for this batch.")
    else:
        print_space_summary(summary)
        print()
        print_carrier_reference()
        visualize_pallets_with_buttons(summary)
