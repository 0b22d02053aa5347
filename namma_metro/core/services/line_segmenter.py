"""
Line Segmenter

Labels each hop of a path with the line that serves it.
"""

from typing import List, Sequence

from ..models.route import EdgeLabel, RouteSegment, UNKNOWN_LINE
from .network_graph import NetworkGraph


class LineSegmenter:
    """Annotates paths with line names for reporting."""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def annotate(self, path: Sequence[int]) -> List[EdgeLabel]:
        """
        Label every hop with a line shared by both stations.

        The first station's lines are scanned in insertion order against the
        second's; the first common name wins. Hops with no shared line (only
        possible for hand-built paths) get UNKNOWN_LINE.
        """
        labels = []
        for index, (a_id, b_id) in enumerate(zip(path, path[1:])):
            a_lines = self.graph.station(a_id).lines
            b_lines = self.graph.station(b_id).lines
            line_name = next((line for line in a_lines if line in b_lines), UNKNOWN_LINE)
            labels.append(EdgeLabel(edge_index=index, line_name=line_name))
        return labels

    def segments(self, path: Sequence[int]) -> List[RouteSegment]:
        """Group consecutive hops on the same line into segments."""
        labels = self.annotate(path)
        segments: List[RouteSegment] = []

        start = 0
        while start < len(labels):
            end = start
            while end + 1 < len(labels) and labels[end + 1].line_name == labels[start].line_name:
                end += 1
            segments.append(RouteSegment(
                line_name=labels[start].line_name,
                start_index=start,
                end_index=end + 1,
                from_station=self.graph.station(path[start]).name,
                to_station=self.graph.station(path[end + 1]).name,
            ))
            start = end + 1

        return segments

    def interchange_stations(self, path: Sequence[int]) -> List[int]:
        """Stations on the path served by more than one line, endpoints included."""
        return [station_id for station_id in path
                if self.graph.station(station_id).is_interchange]
