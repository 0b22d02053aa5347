"""
Route Formatter

Plain-text route summaries and TXT report export.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ...version import __app_display_name__
from ..models.route import Route
from .journey_estimator import JourneyEstimate


class RouteFormatter:
    """Formats Route models as text for terminals and report files."""

    def __init__(self, title: str = __app_display_name__):
        self.title = title
        self.logger = logging.getLogger(__name__)

    def format_route_line(self, route: Route, arrow: str = " -> ") -> str:
        return arrow.join(route.station_names)

    def format_segments(self, route: Route) -> List[str]:
        return [f" - Line {segment.line_name}: {segment.from_station} -> {segment.to_station} "
                f"({segment.stops} stops)"
                for segment in route.segments]

    def format_interchanges(self, route: Route) -> List[str]:
        if not route.interchange_stations:
            return [" - None"]
        return [f" - {name} ({', '.join(route.interchange_lines.get(name, []))})"
                for name in route.interchange_stations]

    def format_summary(self, route: Route, estimate: JourneyEstimate,
                       alternates: Optional[Sequence[Route]] = None) -> str:
        """
        Format a full route summary.

        Args:
            route: Primary route
            estimate: Journey estimate for the primary route
            alternates: Optional alternate routes to list after the summary

        Returns:
            Multi-line text
        """
        lines = [
            f"{self.title} - Route Summary",
            "",
            f"From: {route.from_station}",
            f"To:   {route.to_station}",
            "",
            "Route:",
            self.format_route_line(route),
            "",
            "Segments by line:",
        ]
        lines.extend(self.format_segments(route) or [" - Already at destination"])
        lines.append("")
        lines.append("Interchanges:")
        lines.extend(self.format_interchanges(route))
        lines.append("")
        lines.extend(self._format_totals(estimate))

        if alternates:
            lines.append("")
            lines.append("Alternate routes:")
            for number, alternate in enumerate(alternates, start=1):
                lines.append(f" {number}. {self.format_route_line(alternate)} ({alternate.hops} stops)")

        return "\n".join(lines) + "\n"

    def _format_totals(self, estimate: JourneyEstimate) -> List[str]:
        return [
            "Summary:",
            f" - Total stops: {estimate.hops}",
            f" - Distance   : {estimate.distance_km:.2f} km",
            f" - Time       : {estimate.total_minutes} min "
            f"(incl. {estimate.interchange_minutes} min interchange buffer)",
            f" - Fare est.  : {estimate.currency} {estimate.fare}",
        ]

    def format_report(self, route: Route, estimate: JourneyEstimate,
                      per_hop: JourneyEstimate, generated_at: Optional[datetime] = None) -> str:
        """
        Format a TXT report with a per-hop breakdown under each segment.

        Args:
            route: Route to report
            estimate: Totals for the route
            per_hop: Estimate for a single hop, used for the breakdown rows
            generated_at: Report timestamp, defaults to now
        """
        generated_at = generated_at or datetime.now()
        lines = [
            f"{self.title.upper()} - ROUTE REPORT",
            f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}",
            "",
            "Route:",
            self.format_route_line(route),
            "",
            "Line segments:",
        ]
        for segment in route.segments:
            lines.append(f"{segment.line_name} : {segment.from_station} -> {segment.to_station}")
            for index in range(segment.start_index, segment.end_index):
                lines.append(
                    f"    - {route.station_names[index]} -> {route.station_names[index + 1]} : "
                    f"{per_hop.distance_km:.2f} km, {per_hop.travel_minutes} min, "
                    f"slab {per_hop.currency} {per_hop.fare}")
        lines.append("")
        lines.extend(self._format_totals(estimate))
        return "\n".join(lines) + "\n"

    def export_txt(self, report: str, file_path: Union[str, Path]) -> Path:
        """
        Write a formatted report to a text file.

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report, encoding="utf-8")
        self.logger.info(f"Saved TXT report: {path}")
        return path

