from enum import Enum
from types import MappingProxyType
from typing import Mapping
from dataclasses import dataclass, field


NO_SEPARATOR = "\0"
REST_OF_LINE = -1


class InvalidInputError(ValueError):
    """Raised when the analysis input cannot describe a table at all."""

    pass


class ColumnType(Enum):
    EMPTY = ("empty", 0)
    INTEGER = ("integer", 1)
    REAL = ("real", 2)
    STRING = ("string", 3)

    def __init__(self, label, rank):
        self.label = label
        self.rank = rank

    def __lt__(self, other):
        if not isinstance(other, ColumnType):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, ColumnType):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, ColumnType):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, ColumnType):
            return NotImplemented
        return self.rank >= other.rank

    def widen(self, other):
        """Return the more generic of the two types."""
        return other if other.rank > self.rank else self


@dataclass
class DialectDescriptor:

    separator: str = NO_SEPARATOR
    field_widths: tuple = ()
    metadata: dict = field(default_factory=dict, compare=False)

    @property
    def has_separator(self):
        return self.separator != NO_SEPARATOR

    @property
    def is_fixed_width(self):
        return not self.has_separator and len(self.field_widths) > 0

    @property
    def found(self):
        return self.has_separator or self.is_fixed_width

    def describe(self):
        if self.has_separator:
            return f"separator {self.separator!r}"
        if self.is_fixed_width:
            widths = ", ".join(
                "rest" if w == REST_OF_LINE else str(w) for w in self.field_widths
            )
            return f"fixed width ({widths})"
        return "undetermined"


@dataclass
class ColumnSchema:

    data_type: ColumnType = ColumnType.EMPTY
    size: int = 0
    nullable: bool = False

    def update(self, other):
        """Widen this column with another observation of the same column."""
        self.data_type = self.data_type.widen(other.data_type)
        self.size = max(self.size, other.size)
        self.nullable = self.nullable or other.nullable
        return self

    def copy(self):
        return ColumnSchema(self.data_type, self.size, self.nullable)

    def freeze(self):
        return ColumnDefinition(self.data_type, self.size, self.nullable)


@dataclass(frozen=True)
class ColumnDefinition:
    """Read-only snapshot of a ColumnSchema once inference is finished."""

    data_type: ColumnType
    size: int
    nullable: bool

    def to_dict(self):
        return {
            "data_type": self.data_type.label,
            "size": self.size,
            "nullable": self.nullable,
        }


@dataclass(frozen=True)
class TableSchema:

    has_header: bool
    columns: tuple
    row_lengths: Mapping = field(default_factory=dict)
    header_names: tuple = ()

    def __post_init__(self):
        columns = tuple(
            column.freeze() if isinstance(column, ColumnSchema) else column
            for column in self.columns
        )
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "row_lengths", MappingProxyType(dict(self.row_lengths)))
        object.__setattr__(self, "header_names", tuple(self.header_names))

    @property
    def is_ragged(self):
        return len(self.row_lengths) > 1

    @property
    def column_types(self):
        return [column.data_type for column in self.columns]

    def to_dict(self):
        return {
            "has_header": self.has_header,
            "header_names": list(self.header_names),
            "columns": [column.to_dict() for column in self.columns],
            "row_lengths": {str(k): v for k, v in sorted(self.row_lengths.items())},
        }
