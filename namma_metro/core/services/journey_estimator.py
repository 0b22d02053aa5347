"""
Journey Estimator

Fixed-rate distance, time and fare estimates for a path.
"""

from dataclasses import dataclass
from typing import Optional

from ...managers.config_manager import JourneyConfig


@dataclass(frozen=True)
class JourneyEstimate:
    """Estimated totals for one route."""

    hops: int
    distance_km: float
    travel_minutes: int
    interchange_minutes: int
    fare: int
    currency: str = "Rs"

    @property
    def total_minutes(self) -> int:
        return self.travel_minutes + self.interchange_minutes

    def get_journey_time_display(self) -> str:
        """Get formatted journey time for display."""
        hours, minutes = divmod(self.total_minutes, 60)
        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"


class JourneyEstimator:
    """Applies the configured per-hop constants and fare slabs."""

    def __init__(self, config: Optional[JourneyConfig] = None):
        self.config = config or JourneyConfig()

    def fare_from_distance(self, distance_km: float) -> int:
        """Fare for the first slab whose max_km covers the distance."""
        for slab in self.config.fare_slabs:
            if distance_km <= slab.max_km:
                return slab.fare
        return self.config.max_fare

    def estimate(self, hops: int, interchange_count: int) -> JourneyEstimate:
        """
        Estimate a journey.

        Args:
            hops: Number of edges travelled
            interchange_count: Interchange stations along the route

        Returns:
            JourneyEstimate with distance, time and fare
        """
        if hops < 0 or interchange_count < 0:
            raise ValueError("hops and interchange_count cannot be negative")

        distance_km = round(hops * self.config.km_per_hop, 2)
        return JourneyEstimate(
            hops=hops,
            distance_km=distance_km,
            travel_minutes=hops * self.config.minutes_per_hop,
            interchange_minutes=interchange_count * self.config.interchange_minutes,
            fare=self.fare_from_distance(distance_km),
            currency=self.config.currency,
        )
