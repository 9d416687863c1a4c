from .base_parser import BaseTokenizer
from csv_explorer.inference.csv_core import REST_OF_LINE


class DelimitedTokenizer(BaseTokenizer):
    """Splits on the exact separator; empty and trailing fields are kept."""

    def _setup_tokenizer(self):
        if not self.dialect.has_separator:
            raise ValueError("DelimitedTokenizer needs a dialect with a separator")
        self.separator = self.dialect.separator

    def split_line(self, line):
        return line.split(self.separator)


class FixedWidthTokenizer(BaseTokenizer):

    def _setup_tokenizer(self):
        if not self.dialect.is_fixed_width:
            raise ValueError("FixedWidthTokenizer needs a dialect with field widths")
        self.field_widths = list(self.dialect.field_widths)

    def split_line(self, line):
        parts = []
        start = 0
        for width in self.field_widths:
            if width == REST_OF_LINE:
                parts.append(line[start:].strip())
                break
            parts.append(line[start : start + width].strip())
            start += width
        return parts
