"""Mini README: GeoJSON helper utilities for flight plans.

Builds a LineString Feature from a flight plan so renderers can draw the
route with off-the-shelf tooling. Coordinates stay in map pixels; the map is
a flat plane, not a geographic projection.
"""

from __future__ import annotations

from typing import Dict

from ..flight_planning import FlightPlan


def flight_plan_to_geojson(plan: FlightPlan) -> Dict:
    """Return a GeoJSON Feature describing ``plan`` as a LineString."""

    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [list(point.as_tuple()) for point in plan.waypoints],
        },
        "properties": {
            "planner": plan.planner,
            "labels": list(plan.labels) if plan.labels else [],
            "distance_nm": round(plan.total_distance_nm(), 3),
        },
    }
