from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from csv_explorer.inference.csv_core import (
    ColumnType,
    DialectDescriptor,
    TableSchema,
)
from csv_explorer.inference.dialect_detector import DialectDetector
from csv_explorer.inference.schema_inferer import SchemaInferer
from csv_explorer.inference.settings import AnalyzerSettings
from csv_explorer.inference.utils import split_lines
from csv_explorer.parser.parsing_engine import create_tokenizer

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    dialect: DialectDescriptor
    schema: Optional[TableSchema] = None
    total_lines: int = 0
    rows_analyzed: int = 0
    recommendations: List[str] = field(default_factory=list)
    source: Optional[str] = None
    truncated: bool = False

    @property
    def column_count(self):
        return len(self.schema.columns) if self.schema else 0

    def to_dict(self) -> Dict:
        dialect = {
            "found": self.dialect.found,
            "separator": self.dialect.separator if self.dialect.has_separator else None,
            "field_widths": list(self.dialect.field_widths)
            if self.dialect.is_fixed_width
            else None,
            "description": self.dialect.describe(),
        }
        return {
            "source": self.source,
            "dialect": dialect,
            "schema": self.schema.to_dict() if self.schema else None,
            "total_lines": self.total_lines,
            "rows_analyzed": self.rows_analyzed,
            "truncated": self.truncated,
            "recommendations": list(self.recommendations),
        }


class CsvStatsAnalyzer:

    def __init__(self, settings=None, max_file_lines=1000):
        self.settings = settings or AnalyzerSettings()
        self.detector = DialectDetector(self.settings, max_file_lines=max_file_lines)
        self.inferer = SchemaInferer(self.settings)

    def analyze_text(self, text, has_header=None, source=None) -> AnalysisReport:
        return self.analyze_lines(split_lines(text), has_header, source)

    def analyze_file(self, filepath, has_header=None) -> AnalysisReport:
        lines, truncated = self.detector.read_sample(filepath)
        return self.analyze_lines(
            lines, has_header, source=str(filepath), truncated=truncated
        )

    def analyze_lines(
        self, lines, has_header=None, source=None, truncated=False
    ) -> AnalysisReport:
        dialect = self.detector.detect_lines(lines)
        report = AnalysisReport(
            dialect=dialect, total_lines=len(lines), source=source, truncated=truncated
        )

        if dialect.found:
            rows = create_tokenizer(
                dialect, self.settings.skip_blank_lines
            ).tokenize_lines(lines)
            report.rows_analyzed = len(rows)
            if rows:
                report.schema = self.inferer.infer(rows, has_header)

        report.recommendations = self._generate_recommendations(report)
        logger.info(
            f"Analysis of {source or 'text'}: {dialect.describe()}, "
            f"{report.column_count} columns, {report.rows_analyzed} rows"
        )
        return report

    def _generate_recommendations(self, report):
        recommendations = []

        if report.dialect.metadata.get("lines_analyzed", 0) == 0:
            return ["No content to analyze"]

        if report.truncated:
            recommendations.append(
                f"Only the first {report.total_lines} lines of the file were analyzed"
            )

        if not report.dialect.found:
            recommendations.append(
                "Separator could not be detected - specify the separator or column widths manually"
            )
            return recommendations

        if report.dialect.is_fixed_width:
            recommendations.append(
                "Fixed-width layout detected - verify the column widths before importing"
            )

        schema = report.schema
        if schema.is_ragged:
            lengths = ", ".join(
                f"{count} rows with {length} columns"
                for length, count in sorted(schema.row_lengths.items())
            )
            recommendations.append(f"Inconsistent column counts: {lengths}")

        empty_columns = [
            str(i + 1)
            for i, column in enumerate(schema.columns)
            if column.data_type == ColumnType.EMPTY
        ]
        if empty_columns:
            recommendations.append(
                f"Columns without any values: {', '.join(empty_columns[:5])}"
            )

        if report.rows_analyzed == 1:
            recommendations.append(
                "Only one row available - types and header detection are unreliable"
            )

        return recommendations[:5]
