"""Location-keyed reference data.

Static annual rainfall, aquifer depth and map coordinates for twenty Indian
cities, keyed by normalised location. Every lookup falls back to a documented
default for unknown locations; a missing key is never an error.

Callers pass the key produced by normalize_location_key(). Replacing these
tables with another data source only requires keeping the function contracts.
"""

from types import MappingProxyType

DEFAULT_RAINFALL_MM = 1000
DEFAULT_AQUIFER_DEPTH_M = 25
DEFAULT_COORDINATES = (20.5937, 78.9629)  # Centre of India

RAINFALL_MM: MappingProxyType[str, int] = MappingProxyType(
    {
        "mumbai": 2400,
        "delhi": 790,
        "bangalore": 970,
        "chennai": 1400,
        "kolkata": 1580,
        "hyderabad": 810,
        "pune": 760,
        "ahmedabad": 800,
        "jaipur": 650,
        "lucknow": 980,
        "kanpur": 820,
        "nagpur": 1170,
        "indore": 1050,
        "thane": 2400,
        "bhopal": 1150,
        "visakhapatnam": 1100,
        "patna": 1200,
        "vadodara": 900,
        "ghaziabad": 790,
        "ludhiana": 780,
    }
)

AQUIFER_DEPTH_M: MappingProxyType[str, int] = MappingProxyType(
    {
        "mumbai": 15,
        "delhi": 25,
        "bangalore": 35,
        "chennai": 8,
        "kolkata": 12,
        "hyderabad": 45,
        "pune": 20,
        "ahmedabad": 50,
        "jaipur": 60,
        "lucknow": 18,
        "kanpur": 22,
        "nagpur": 30,
        "indore": 25,
        "thane": 15,
        "bhopal": 40,
        "visakhapatnam": 10,
        "patna": 14,
        "vadodara": 35,
        "ghaziabad": 25,
        "ludhiana": 28,
    }
)

COORDINATES: MappingProxyType[str, tuple[float, float]] = MappingProxyType(
    {
        "mumbai": (19.0760, 72.8777),
        "delhi": (28.6139, 77.2090),
        "bangalore": (12.9716, 77.5946),
        "chennai": (13.0827, 80.2707),
        "kolkata": (22.5726, 88.3639),
        "hyderabad": (17.3850, 78.4867),
        "pune": (18.5204, 73.8567),
        "ahmedabad": (23.0225, 72.5714),
        "jaipur": (26.9124, 75.7873),
        "lucknow": (26.8467, 80.9462),
        "kanpur": (26.4499, 80.3319),
        "nagpur": (21.1458, 79.0882),
        "indore": (22.7196, 75.8577),
        "thane": (19.2183, 72.9781),
        "bhopal": (23.2599, 77.4126),
        "visakhapatnam": (17.6868, 83.2185),
        "patna": (25.5941, 85.1376),
        "vadodara": (22.3072, 73.1812),
        "ghaziabad": (28.6692, 77.4538),
        "ludhiana": (30.9010, 75.8573),
    }
)


def normalize_location_key(location: str) -> str:
    """Reduce a free-text location to its lookup key.

    Lower-cases, keeps the text before the first comma and trims whitespace,
    so "Mumbai, Maharashtra", "mumbai" and "  MUMBAI , X" share one key.
    """
    return location.lower().split(",")[0].strip()


def rainfall_for(location_key: str) -> int:
    """Annual rainfall in millimetres, or DEFAULT_RAINFALL_MM if unknown."""
    return RAINFALL_MM.get(location_key) or DEFAULT_RAINFALL_MM


def aquifer_depth_for(location_key: str) -> int:
    """Aquifer depth in metres, or DEFAULT_AQUIFER_DEPTH_M if unknown."""
    return AQUIFER_DEPTH_M.get(location_key) or DEFAULT_AQUIFER_DEPTH_M


def coordinates_for(location_key: str) -> tuple[float, float]:
    """(latitude, longitude) of the location, or DEFAULT_COORDINATES if unknown."""
    return COORDINATES.get(location_key, DEFAULT_COORDINATES)


def known_locations() -> list[str]:
    """Sorted keys of all locations with reference data."""
    return sorted(RAINFALL_MM)
