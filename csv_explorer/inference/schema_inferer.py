import re
from collections import Counter
import logging

from .csv_core import ColumnSchema, ColumnType, InvalidInputError, TableSchema
from .settings import AnalyzerSettings

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER = re.compile(r"^\s*([+-]?)([0-9]+)\s*$")
_REAL = re.compile(r"^\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$")


class SchemaInferer:
    """
    Infers column types, sizes and nullability from rows of text fields.

    Rows are expected to be tokenized already. The first row may be a
    header; when the caller does not know, it is judged to be one if
    all of its fields are strings while some data column is not.
    """

    def __init__(self, settings=None):
        self.settings = settings or AnalyzerSettings()

    def classify(self, text) -> ColumnSchema:
        if text is None or not text.strip():
            return ColumnSchema(ColumnType.EMPTY, 0, True)

        return ColumnSchema(self._classify_type(text), len(text), False)

    def _classify_type(self, text):
        match = _INTEGER.match(text)
        if match and INT64_MIN <= int(match.group(1) + match.group(2)) <= INT64_MAX:
            if text.startswith("0") and not self.settings.allow_leading_zeros:
                return ColumnType.STRING
            if len(text) > self.settings.max_integer_length:
                return ColumnType.STRING
            return ColumnType.INTEGER

        if _REAL.match(text):
            return ColumnType.REAL

        return ColumnType.STRING

    def infer(self, rows, has_header=None) -> TableSchema:
        rows = list(rows)
        if not rows:
            raise InvalidInputError("Cannot infer a schema from an empty row sequence")

        columns = []
        header_types = []
        header_names = ()
        row_lengths = Counter()
        all_strings = True

        for index, row in enumerate(rows):
            row_lengths[len(row)] += 1

            if index == 0 and has_header is not False:
                header_names = tuple(row)
                for text in row:
                    header_type = self.classify(text)
                    header_types.append(header_type)
                    if header_type.data_type != ColumnType.STRING:
                        all_strings = False
                continue

            self._fold_row(columns, [self.classify(text) for text in row])

        if has_header is None:
            detected = all_strings and any(
                column.data_type != ColumnType.STRING for column in columns
            )
        else:
            detected = has_header

        logger.info(
            f"Header row analysis: user set={has_header is not None}, "
            f"first row all strings={all_strings}, "
            f"data string columns={sum(1 for c in columns if c.data_type == ColumnType.STRING)}/{len(columns)}, "
            f"header row={detected}"
        )

        if has_header is None and not detected:
            # The candidate header was really data
            self._fold_row(columns, header_types)

        if len(row_lengths) > 1:
            logger.warning(
                "Column count mismatch: "
                + ", ".join(
                    f"{count} rows had {length} columns"
                    for length, count in sorted(row_lengths.items())
                )
            )

        return TableSchema(
            has_header=detected,
            columns=tuple(columns),
            row_lengths=dict(row_lengths),
            header_names=header_names if detected else (),
        )

    @staticmethod
    def _fold_row(columns, classified):
        for i, column_type in enumerate(classified):
            if len(columns) <= i:
                columns.append(column_type.copy())
            else:
                columns[i].update(column_type)
