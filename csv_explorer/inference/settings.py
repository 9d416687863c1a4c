from dataclasses import dataclass, fields
from pathlib import Path
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyzerSettings:
    """
    Read-only knobs for dialect detection and type classification.

    separators:           preferred separator characters, tab may be written as "\\t"
    allow_leading_zeros:  classify "007" as an integer instead of a string
    max_integer_length:   longest text that may still classify as an integer
    skip_blank_lines:     leave empty and whitespace-only lines out of sampling and tokenizing
    """

    separators: str = ",;|\\t"
    allow_leading_zeros: bool = False
    max_integer_length: int = 12
    skip_blank_lines: bool = False

    def __post_init__(self):
        if not isinstance(self.separators, str) or not self.separators:
            raise ValueError("separators must be a non-empty string")
        if (
            isinstance(self.max_integer_length, bool)
            or not isinstance(self.max_integer_length, int)
            or self.max_integer_length <= 0
        ):
            raise ValueError(
                f"max_integer_length must be a positive integer, got {self.max_integer_length!r}"
            )
        if not isinstance(self.allow_leading_zeros, bool):
            raise ValueError(
                f"allow_leading_zeros must be a boolean, got {self.allow_leading_zeros!r}"
            )
        if not isinstance(self.skip_blank_lines, bool):
            raise ValueError(
                f"skip_blank_lines must be a boolean, got {self.skip_blank_lines!r}"
            )

    @property
    def preferred_separators(self):
        return self.separators.replace("\\t", "\t")

    def is_preferred(self, char):
        return char in self.preferred_separators

    @classmethod
    def from_dict(cls, data):
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Settings must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")

        return cls(**data)

    @classmethod
    def from_yaml(cls, path):
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        settings = cls.from_dict(data)
        logger.info(f"Loaded analyzer settings from {path}")
        return settings

    def with_overrides(self, **overrides):
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return AnalyzerSettings(**values)
