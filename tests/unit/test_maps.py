"""Unit tests for the map preview descriptor."""

from rainwise.lookups import DEFAULT_COORDINATES
from rainwise.maps import build_map_preview


def test_known_location_preview():
    """Test preview for a known location uses its coordinates."""
    preview = build_map_preview("Chennai, Tamil Nadu")

    assert preview.location == "Chennai, Tamil Nadu"
    assert (preview.latitude, preview.longitude) == (13.0827, 80.2707)
    assert preview.zoom == 13
    assert preview.radius_m == 500.0
    assert preview.is_default is False


def test_unknown_location_preview():
    """Test unknown location is centred on India and flagged."""
    preview = build_map_preview("Atlantis")

    assert (preview.latitude, preview.longitude) == DEFAULT_COORDINATES
    assert preview.is_default is True


def test_preview_tile_source():
    """Test the OpenStreetMap tile template and attribution."""
    preview = build_map_preview("Pune")

    assert "{z}/{x}/{y}" in preview.tile_url
    assert "OpenStreetMap" in preview.attribution
    assert preview.model_dump(by_alias=True)["isDefault"] is False
