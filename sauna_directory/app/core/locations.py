"""
Approximate map coordinates for Stockholm districts.

Saunas do not store coordinates yet, so map markers are placed by
looking for a known street or district name in the address.  Entries
are checked in order; the first keyword found wins.  Coordinates are
``(longitude, latitude)`` as expected by the map widget.
"""

from typing import Tuple

Coordinates = Tuple[float, float]

STOCKHOLM_CENTER: Coordinates = (18.0686, 59.3293)

DISTRICT_COORDINATES: Tuple[Tuple[Tuple[str, ...], Coordinates], ...] = (
    (("drottninggatan", "stureplan"), STOCKHOLM_CENTER),
    (("söder", "götgatan"), (18.0649, 59.3165)),
    (("nacka", "hamndalsvägen"), (18.1634, 59.3117)),
    (("haninge", "hellasgården"), (18.1344, 59.1687)),
    (("tumba", "flottsbro"), (17.8333, 59.1667)),
    (("österhaninge", "ågesta"), (18.1833, 59.1333)),
    (("långholmen",), (18.0333, 59.3167)),
    (("hammarby",), (18.0833, 59.3)),
    (("blasieholmshamnen",), (18.0833, 59.3333)),
)


def approximate_coordinates(address: str) -> Coordinates:
    """Return approximate coordinates for ``address`` (city center if unknown)."""
    address_lower = address.lower()
    for keywords, coordinates in DISTRICT_COORDINATES:
        if any(keyword in address_lower for keyword in keywords):
            return coordinates
    return STOCKHOLM_CENTER
