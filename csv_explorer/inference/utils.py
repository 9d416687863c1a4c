import gzip
import bz2
import lzma
import re
import statistics
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import logging

logger = logging.getLogger(__name__)

SAMPLE_WINDOW = 21

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class CompressionHandler:
    """Opens plain, gzip, bzip2 and xz/lzma files as text by suffix."""

    OPENERS = {
        ".gz": gzip.open,
        ".bz2": bz2.open,
        ".xz": lzma.open,
        ".lzma": lzma.open,
    }

    @classmethod
    def opener_for(cls, filepath):
        return cls.OPENERS.get(Path(filepath).suffix.lower(), open)

    @classmethod
    def open_file(cls, filepath):
        """Yield raw lines; terminators are kept so \\r-only files still split."""
        opener = cls.opener_for(filepath)
        try:
            with opener(
                filepath, "rt", encoding="utf-8", errors="ignore", newline=""
            ) as f:
                yield from f
        except Exception as e:
            logger.error(f"Error opening file {filepath}: {e}")
            raise


def split_lines(text):
    """Split on \\r\\n, \\r or \\n; a trailing terminator adds no extra line."""
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def content_lines(lines):
    return [line for line in lines if line.strip()]


def sample_lines(lines, max_lines=SAMPLE_WINDOW, skip_blank=False):
    """First max_lines lines; blank ones count unless skip_blank is set."""
    if skip_blank:
        lines = content_lines(lines)
    return list(lines)[:max_lines]


def char_frequencies(line):
    return Counter(line)


@dataclass
class LineStatistics:
    """Character and whitespace statistics over a sample of lines."""

    line_count: int = 0
    frequencies: list = field(default_factory=list)
    occurrences: Counter = field(default_factory=Counter)
    big_spaces: Counter = field(default_factory=Counter)
    word_starts: Counter = field(default_factory=Counter)

    def add_line(self, line):
        letter_frequency = char_frequencies(line)
        self.frequencies.append(letter_frequency)
        self.occurrences.update(letter_frequency)

        spaces = 0
        for i, c in enumerate(line):
            if c == " ":
                spaces += 1
                if spaces >= 2:
                    self.big_spaces[i] += 1
            else:
                if spaces >= 2:
                    self.word_starts[i] += 1
                spaces = 0

        self.line_count += 1

    def variance(self, char):
        counts = [frequency.get(char, 0) for frequency in self.frequencies]
        return statistics.pvariance(counts)

    def variances(self):
        """Per-line frequency variance for every character seen in the sample."""
        if self.line_count == 0:
            return {}
        return {c: self.variance(c) for c in self.occurrences}

    def common_big_spaces(self):
        return sorted(
            position
            for position, count in self.big_spaces.items()
            if count == self.line_count
        )


def collect_line_statistics(lines, max_lines=SAMPLE_WINDOW, skip_blank=False):
    stats = LineStatistics()
    for line in sample_lines(lines, max_lines, skip_blank):
        stats.add_line(line)

    logger.debug(
        f"Collected statistics for {stats.line_count} lines, "
        f"{len(stats.occurrences)} distinct characters"
    )
    return stats
