"""Readers for delimited text and binary tables."""

from .binary_table_reader import BinaryTableReader
from .delimited_text_tokenizer import PandasDelimitedTextTokenizer

__all__ = ["BinaryTableReader", "PandasDelimitedTextTokenizer"]
