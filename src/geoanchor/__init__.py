"""
geoanchor - place objects in a local 3D scene by their real-world position.

This package converts coordinates between WGS84 latitude/longitude,
WGS84/UTM easting/northing and a local Cartesian frame anchored at a UTM
point.
"""

__version__ = "0.1.0"
