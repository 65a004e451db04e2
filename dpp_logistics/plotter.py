"""
3D visualization helpers for pallet loads computed by dpp_logistics.

Features:
- EUR 1 pallet deck drawn as a flat cuboid, units as cuboids on top.
- Units placed layer by layer in the orientation chosen by the pallet fitter.
- Previous/Next buttons to navigate between the pallets of a batch.
- Text summary (pallet + batch) inside the window.

Requires:
    matplotlib
"""

from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.widgets import Button
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from .catalog import EURO_PALLET
from .models import BatchSpaceSummary, PalletCalculation

Position = Tuple[float, float, float]


def set_axis_equal(ax):
    """
    Set 3D plot axes to equal scale.
    """
    x_limits = ax.get_xlim3d()
    y_limits = ax.get_ylim3d()
    z_limits = ax.get_zlim3d()

    x_range = abs(x_limits[1] - x_limits[0])
    y_range = abs(y_limits[1] - y_limits[0])
    z_range = abs(z_limits[1] - z_limits[0])

    x_middle = (x_limits[1] + x_limits[0]) / 2
    y_middle = (y_limits[1] + y_limits[0]) / 2
    z_middle = (z_limits[1] + z_limits[0]) / 2

    plot_radius = 0.5 * max([x_range, y_range, z_range])

    ax.set_xlim3d([x_middle - plot_radius, x_middle + plot_radius])
    ax.set_ylim3d([y_middle - plot_radius, y_middle + plot_radius])
    ax.set_zlim3d([z_middle - plot_radius, z_middle + plot_radius])


def cuboid_faces(origin, size):
    """
    Return list of 6 faces (each face is 4 vertices) for a cuboid.
    origin: (x0, y0, z0)
    size: (dx, dy, dz)
    """
    x0, y0, z0 = origin
    dx, dy, dz = size

    x = [x0, x0 + dx]
    y = [y0, y0 + dy]
    z = [z0, z0 + dz]

    return [
        # bottom
        [(x[0], y[0], z[0]), (x[1], y[0], z[0]), (x[1], y[1], z[0]), (x[0], y[1], z[0])],
        # top
        [(x[0], y[0], z[1]), (x[1], y[0], z[1]), (x[1], y[1], z[1]), (x[0], y[1], z[1])],
        # front (y = y[0])
        [(x[0], y[0], z[0]), (x[1], y[0], z[0]), (x[1], y[0], z[1]), (x[0], y[0], z[1])],
        # back (y = y[1])
        [(x[0], y[1], z[0]), (x[1], y[1], z[0]), (x[1], y[1], z[1]), (x[0], y[1], z[1])],
        # left (x = x[0])
        [(x[0], y[0], z[0]), (x[0], y[1], z[0]), (x[0], y[1], z[1]), (x[0], y[0], z[1])],
        # right (x = x[1])
        [(x[1], y[0], z[0]), (x[1], y[1], z[0]), (x[1], y[1], z[1]), (x[1], y[0], z[1])],
    ]


def pallet_unit_positions(pallet: PalletCalculation, units: int) -> List[Position]:
    """
    Origins of `units` units on one pallet, filled layer by layer, row by row.

    z starts on top of the pallet deck. Layouts that were floored to one unit
    per layer (unit overhangs the deck) still place that unit at the corner.
    """
    cols_l, cols_w = pallet.layer_columns
    cols_l, cols_w = max(1, cols_l), max(1, cols_w)
    per_layer = min(pallet.units_per_layer, cols_l * cols_w)
    fl, fw = pallet.unit_footprint_cm

    positions: List[Position] = []
    for n in range(min(units, pallet.units_per_pallet)):
        layer, slot = divmod(n, per_layer)
        row, col = divmod(slot, cols_l)
        positions.append(
            (col * fl, row * fw, EURO_PALLET.height_cm + layer * pallet.unit_height_cm)
        )
    return positions


def pallet_loads(pallet: PalletCalculation) -> List[int]:
    """Units on each pallet of the batch: full pallets, then the last one."""
    if pallet.pallets_needed <= 0:
        return []
    return [pallet.units_per_pallet] * (pallet.pallets_needed - 1) + [pallet.last_pallet_units]


def draw_pallet(ax, color="burlywood", alpha=0.8):
    """
    Draw the pallet deck.
    """
    faces = cuboid_faces(
        (0, 0, 0), (EURO_PALLET.length_cm, EURO_PALLET.width_cm, EURO_PALLET.height_cm)
    )
    deck = Poly3DCollection(faces, facecolors=color, linewidths=1, edgecolors="k", alpha=alpha)
    ax.add_collection3d(deck)


def draw_unit(ax, position, dims, color="tab:blue", alpha=0.6):
    faces = cuboid_faces(position, dims)
    cuboid = Poly3DCollection(faces, facecolors=color, linewidths=0.5, edgecolors="k", alpha=alpha)
    ax.add_collection3d(cuboid)


def _pallet_summary_text(summary: BatchSpaceSummary, index: int, units: int) -> str:
    p = summary.pallet
    lines = [
        f"Pallet {index + 1}/{p.pallets_needed} ({EURO_PALLET.label})",
        f"Units: {units}/{p.units_per_pallet}  layout {p.layout_desc}",
    ]
    if p.total_pallet_weight_kg is not None and summary.unit_weight_grams:
        lines.append(f"Weight: {units * summary.unit_weight_grams / 1000:.1f} kg")
    if summary.warnings:
        lines.append("Warnings: " + ", ".join(summary.warnings))
    return "\n".join(lines)


def visualize_pallets_with_buttons(summary: Optional[BatchSpaceSummary]):
    """
    Show a single window with 'Previous' and 'Next' buttons
    to switch between the pallets of a batch, plus a text summary.
    """
    if summary is None or summary.pallet.pallets_needed <= 0:
        print("No pallets to visualize.")
        return

    pallet = summary.pallet
    loads = pallet_loads(pallet)
    state = {"i": 0}

    fig = plt.figure()
    ax = fig.add_subplot(111, projection="3d")

    # keep a reference to the text artist so we can update it
    text_box = {"artist": None}

    colors = [
        "tab:blue", "tab:orange", "tab:green", "tab:red",
        "tab:purple", "tab:brown", "tab:pink", "tab:gray",
    ]
    unit_size = (*pallet.unit_footprint_cm, pallet.unit_height_cm)

    def redraw():
        ax.clear()
        units = loads[state["i"]]

        draw_pallet(ax)
        for pos in pallet_unit_positions(pallet, units):
            layer = int(round((pos[2] - EURO_PALLET.height_cm) / pallet.unit_height_cm))
            draw_unit(ax, pos, unit_size, color=colors[layer % len(colors)])

        ax.set_xlim(0, EURO_PALLET.length_cm)
        ax.set_ylim(0, EURO_PALLET.width_cm)
        ax.set_zlim(0, EURO_PALLET.height_cm + EURO_PALLET.max_stack_height_cm)
        ax.set_xlabel("X (length)")
        ax.set_ylabel("Y (width)")
        ax.set_zlabel("Z (height)")
        ax.set_title(f"Pallet {state['i'] + 1}/{len(loads)}")

        set_axis_equal(ax)

        if text_box["artist"] is not None:
            text_box["artist"].remove()

        text_box["artist"] = fig.text(
            0.01, 0.01, _pallet_summary_text(summary, state["i"], units),
            fontsize=8,
            va="bottom", ha="left",
            bbox=dict(facecolor="white", alpha=0.7, edgecolor="gray"),
        )

        plt.draw()

    class Index:
        def next(self, event):
            state["i"] = (state["i"] + 1) % len(loads)
            redraw()

        def prev(self, event):
            state["i"] = (state["i"] - 1) % len(loads)
            redraw()

    callback = Index()

    # Buttons under the plot
    axprev = fig.add_axes([0.3, 0.02, 0.1, 0.05])
    axnext = fig.add_axes([0.6, 0.02, 0.1, 0.05])

    bprev = Button(axprev, "Previous")
    bprev.on_clicked(callback.prev)

    bnext = Button(axnext, "Next")
    bnext.on_clicked(callback.next)

    redraw()
    plt.show()
