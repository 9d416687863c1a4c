"""
CSV Dialect and Schema Inference

Statistical analysis of delimited text with unknown structure.

This package provides:
- Separator detection from per-line character frequency variance
- Fixed-width layout detection when no separator stands out
- Column type, size and nullability inference with type widening
- Header row detection
- Support for compressed files (.gz, .bz2, .xz, .lzma)

Basic usage:
    from csv_explorer.inference import DialectDetector, SchemaInferer
    from csv_explorer.parser.parsing_engine import tokenize

    dialect = DialectDetector().detect(text)
    if dialect.found:
        schema = SchemaInferer().infer(tokenize(text, dialect))

        print(f"Header: {schema.has_header}")
        for column in schema.columns:
            print(f"  {column.data_type.label} size={column.size} nullable={column.nullable}")
"""

from .csv_core import (
    NO_SEPARATOR,
    REST_OF_LINE,
    ColumnDefinition,
    ColumnSchema,
    ColumnType,
    DialectDescriptor,
    InvalidInputError,
    TableSchema,
)
from .settings import AnalyzerSettings
from .dialect_detector import DialectDetector
from .schema_inferer import SchemaInferer

__all__ = [
    "NO_SEPARATOR",
    "REST_OF_LINE",
    "AnalyzerSettings",
    "ColumnDefinition",
    "ColumnSchema",
    "ColumnType",
    "DialectDescriptor",
    "DialectDetector",
    "InvalidInputError",
    "SchemaInferer",
    "TableSchema",
]
