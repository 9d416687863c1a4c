from .base_detector import BaseDialectDetector
from .csv_core import DialectDescriptor, REST_OF_LINE

import logging

logger = logging.getLogger(__name__)


class FixedWidthDetector(BaseDialectDetector):

    MIN_FIELDS = 3

    def detect(self, stats) -> DialectDescriptor:
        if stats.line_count == 0:
            return self.not_found(stats, "no lines")

        common_spaces = stats.common_big_spaces()

        last_value = 0
        last_start = 0
        widths = []
        for position in common_spaces:
            if position != last_value + 1:
                widths.append(position - last_start)
                last_start = position
            last_value = position

        if len(widths) < self.MIN_FIELDS:
            logger.debug(
                f"{self.name}: only {len(widths)} column boundaries, fixed width unlikely"
            )
            return self.not_found(stats, "too few column boundaries")

        widths.append(REST_OF_LINE)
        return DialectDescriptor(
            field_widths=tuple(widths),
            metadata={
                "detector": self.name,
                "rule": "common_big_spaces",
                "boundary_positions": common_spaces,
                "lines_analyzed": stats.line_count,
            },
        )
