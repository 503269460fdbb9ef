"""Mini README: Helper functions for consumers of flight plans.

Currently exports the GeoJSON conversion used by the CLI and any map
front-end that prefers standard geometry payloads.
"""

from .geojson import flight_plan_to_geojson

__all__ = ["flight_plan_to_geojson"]
