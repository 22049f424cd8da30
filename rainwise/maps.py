"""Map preview descriptor for an assessment location.

Produces the centre point, zoom and highlighted area a map widget needs. No
geocoding is performed; coordinates come from the static location table.
"""

from rainwise.lookups import COORDINATES, coordinates_for, normalize_location_key
from rainwise.models.domain import MapPreview


def build_map_preview(location: str) -> MapPreview:
    """Build the map preview for a free-text location.

    Unknown locations are centred on the middle of India and flagged with
    is_default so the widget can say the position is approximate.
    """
    location_key = normalize_location_key(location)
    latitude, longitude = coordinates_for(location_key)
    return MapPreview(
        location=location,
        latitude=latitude,
        longitude=longitude,
        is_default=location_key not in COORDINATES,
    )
