from contextlib import closing
from itertools import islice
from pathlib import Path
import logging

from .csv_core import DialectDescriptor
from .settings import AnalyzerSettings
from .utils import CompressionHandler, SAMPLE_WINDOW, collect_line_statistics, split_lines
from .separator_detector import SeparatorDetector
from .fixed_width_detector import FixedWidthDetector

logger = logging.getLogger(__name__)


class DialectDetector:

    def __init__(self, settings=None, sample_window=SAMPLE_WINDOW, max_file_lines=1000):
        self.settings = settings or AnalyzerSettings()
        self.sample_window = sample_window
        self.max_file_lines = max_file_lines

        # Separators win over fixed width; fixed width is only a fallback
        self.detectors = [
            SeparatorDetector(self.settings),
            FixedWidthDetector(self.settings),
        ]

        logger.info(
            f"Initialized dialect detector with {len(self.detectors)} strategies"
        )

    def detect(self, text) -> DialectDescriptor:
        return self.detect_lines(split_lines(text))

    def detect_lines(self, lines) -> DialectDescriptor:
        stats = collect_line_statistics(
            lines, self.sample_window, self.settings.skip_blank_lines
        )

        if stats.line_count == 0:
            logger.info("No lines to analyze")
            return DialectDescriptor(
                metadata={"lines_analyzed": 0, "reason": "no lines"}
            )

        result = None
        for detector in self.detectors:
            logger.debug(f"Running detector: {detector.name}")
            result = detector.detect(stats)
            if result.found:
                break

        result.metadata["word_starts"] = dict(sorted(stats.word_starts.items()))
        logger.info(f"Detected dialect: {result.describe()}")
        return result

    def detect_file(self, filepath) -> DialectDescriptor:
        return self.detect_lines(self.read_lines(filepath))

    def read_lines(self, filepath):
        lines, _ = self.read_sample(filepath)
        return lines

    def read_sample(self, filepath):
        """
        Read at most max_file_lines lines from a plain or compressed file.

        Returns the lines and whether the file had more lines than were read.
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        if not filepath.is_file():
            raise ValueError(f"Path is not a file: {filepath}")

        try:
            with closing(CompressionHandler.open_file(filepath)) as handle:
                lines = [
                    line.rstrip("\n\r")
                    for line in islice(handle, self.max_file_lines + 1)
                ]
        except Exception as e:
            logger.error(f"Error reading file {filepath}: {e}")
            raise

        truncated = len(lines) > self.max_file_lines
        if truncated:
            del lines[self.max_file_lines :]
            logger.warning(f"Read only the first {len(lines)} lines of {filepath}")
        else:
            logger.info(f"Read {len(lines)} lines from {filepath}")

        return lines, truncated
