from abc import ABC, abstractmethod

from csv_explorer.inference.utils import content_lines, split_lines


class BaseTokenizer(ABC):
    def __init__(self, dialect, skip_blank_lines=False):
        self.dialect = dialect
        self.skip_blank_lines = skip_blank_lines
        self._setup_tokenizer()

    @abstractmethod
    def _setup_tokenizer(self):
        pass

    @abstractmethod
    def split_line(self, line):
        pass

    def tokenize(self, text):
        return self.tokenize_lines(split_lines(text))

    def tokenize_lines(self, lines):
        # Same blank-line rule the detector samples with
        if self.skip_blank_lines:
            lines = content_lines(lines)
        return [self.split_line(line) for line in lines]
