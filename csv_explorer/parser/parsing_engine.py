import logging

from .base_parser import BaseTokenizer
from .delimited_parsers import DelimitedTokenizer, FixedWidthTokenizer

logger = logging.getLogger(__name__)


def create_tokenizer(dialect, skip_blank_lines=False) -> BaseTokenizer:
    if dialect.has_separator:
        tokenizer = DelimitedTokenizer(dialect, skip_blank_lines)
    elif dialect.is_fixed_width:
        tokenizer = FixedWidthTokenizer(dialect, skip_blank_lines)
    else:
        raise ValueError("Cannot create tokenizer for an undetermined dialect")

    logger.debug(f"Created {tokenizer.__class__.__name__} for {dialect.describe()}")
    return tokenizer


def tokenize(text, dialect, skip_blank_lines=False):
    return create_tokenizer(dialect, skip_blank_lines).tokenize(text)
