from .base_detector import BaseDialectDetector
from .csv_core import DialectDescriptor

import logging

logger = logging.getLogger(__name__)


class SeparatorDetector(BaseDialectDetector):
    """
    Picks the separator by per-line frequency variance.

    A delimiter shows up a near-constant number of times on every record,
    so its variance across lines is (close to) zero, while content
    characters drift with the data.
    """

    def detect(self, stats) -> DialectDescriptor:
        if stats.line_count == 0:
            return self.not_found(stats, "no lines")

        variances = stats.variances()
        occurrences = stats.occurrences

        for rule, pick in (
            ("preferred_zero_variance", self._preferred_zero_variance),
            ("lowest_variance", self._lowest_variance),
            ("second_lowest_variance", self._second_lowest_variance),
            ("frequent_zero_variance", self._frequent_zero_variance),
        ):
            separator = pick(variances, occurrences, stats.line_count)
            if separator is not None:
                logger.debug(f"{self.name}: rule {rule} chose {separator!r}")
                return DialectDescriptor(
                    separator=separator,
                    metadata={
                        "detector": self.name,
                        "rule": rule,
                        "variance": variances[separator],
                        "occurrences": occurrences[separator],
                        "lines_analyzed": stats.line_count,
                    },
                )
            logger.debug(f"{self.name}: rule {rule} found nothing")

        return self.not_found(stats, "no low-variance separator")

    def _preferred_zero_variance(self, variances, occurrences, line_count):
        candidates = [
            c for c, v in variances.items() if v == 0 and self.settings.is_preferred(c)
        ]
        return self._most_frequent(candidates, occurrences)

    def _lowest_variance(self, variances, occurrences, line_count):
        ranked = self._on_every_line(variances, occurrences, line_count)
        if ranked and self.settings.is_preferred(ranked[0]):
            return ranked[0]
        return None

    def _second_lowest_variance(self, variances, occurrences, line_count):
        ranked = self._on_every_line(variances, occurrences, line_count)
        if len(ranked) > 1 and self.settings.is_preferred(ranked[1]):
            return ranked[1]
        return None

    def _frequent_zero_variance(self, variances, occurrences, line_count):
        candidates = [
            c
            for c, v in variances.items()
            if v == 0 and occurrences[c] >= line_count * 2
        ]
        return self._most_frequent(candidates, occurrences)

    @staticmethod
    def _on_every_line(variances, occurrences, line_count):
        # sorted() is stable, so ties keep first-appearance order
        ranked = sorted(variances, key=lambda c: variances[c])
        return [c for c in ranked if occurrences[c] >= line_count]

    @staticmethod
    def _most_frequent(candidates, occurrences):
        if not candidates:
            return None
        return sorted(candidates, key=lambda c: occurrences[c], reverse=True)[0]
