"""Delimiter-based word tokenization of strings, files, file lists and directories."""

__version__ = "0.1.0"
__all__ = ["delimiter_tokenizer", "accumulating_tokenizer", "demo"]