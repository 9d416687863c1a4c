from abc import ABC, abstractmethod

from .csv_core import DialectDescriptor


class BaseDialectDetector(ABC):

    def __init__(self, settings):
        self.name = self.__class__.__name__
        self.settings = settings

    @abstractmethod
    def detect(self, stats) -> DialectDescriptor:
        """Inspect sampled line statistics and describe the dialect, if any."""
        pass

    def not_found(self, stats, reason):
        return DialectDescriptor(
            metadata={
                "detector": self.name,
                "lines_analyzed": stats.line_count,
                "reason": reason,
            }
        )
