"""Geographic bounds for the phenological season estimate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """SW/NE lat-lon bounding box (south/west inclusive, north/east exclusive)."""

    swlat: float
    swlng: float
    nelat: float
    nelng: float

    def contains(self, lat: float, lon: float) -> bool:
        """Return True if the point lies inside the box."""
        return self.swlat <= lat < self.nelat and self.swlng <= lon < self.nelng


# Europe, where the phenological fronts are defined
PHENOLOGY_REGION_BBOX = BoundingBox(swlat=35.0, swlng=-11.0, nelat=71.0, nelng=25.0)
