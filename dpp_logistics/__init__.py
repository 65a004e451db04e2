"""
dpp_logistics package

Logistics space-fitting engine for product batches: how many units go on a
Euro pallet, how many pallets go into a freight container, which standard
shipping carton fits best and which parcel carriers accept it.

Public surface:
- __version__: package version string
- get_version(): helper to retrieve the version

The calculation modules (`volume`, `logistics`) are pure and import nothing
from the web layer. Keep this file minimal to avoid import-time side-effects.
"""

from typing import Final

__all__ = ["__version__", "get_version"]

__version__: Final[str] = "0.1.0"


def get_version() -> str:
    """
    Return the package version.
    """
    return __version__
