"""Tokenizer variant that appends to existing token lists."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from tokenizador.delimiter_tokenizer import DelimiterTokenizer, _read_text, _report


class AccumulatingTokenizer(DelimiterTokenizer):
    """Tokenizer whose results are appended to what was gathered before.

    When a file is tokenized, the tokens of each line are added to those of
    the previous lines and the whole gathered list is written after each line.
    Listed files are written to the part of their name before the first dot
    with ``.tk`` appended.
    """

    def tokenize_into(self, text: str, tokens: list[str]) -> list[str]:
        """Append the tokens of ``text`` to ``tokens`` and return that list."""
        tokens.extend(self.tokenize(text))
        return tokens

    def _file_tokens(self, lines: Iterable[str]) -> Iterator[str]:
        gathered: list[str] = []
        for line in lines:
            if line:
                self.tokenize_into(line, gathered)
                yield from gathered

    def _tokenize_listed(self, paths: Iterable[str]) -> bool:
        results = [
            self.tokenize_file(path, path.split(".", 1)[0] + ".tk") for path in paths
        ]
        return all(results)

    def tokenize_file_list(self, list_path: str) -> bool:
        """Tokenize the files named in ``list_path`` after its first line."""
        try:
            content = _read_text(list_path)
        except OSError:
            _report(f"ERROR: No existe el archivo: {list_path}")
            return False
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return self._tokenize_listed(lines[1:])

    def tokenize_directory(self, directory: str) -> bool:
        """Tokenize every entry below ``directory``; subdirectories count as failures."""
        if not os.path.isdir(directory):
            return False
        entries = [directory]
        for root, dirs, files in os.walk(directory, followlinks=True):
            entries.extend(os.path.join(root, name) for name in dirs + files)
        return self._tokenize_listed(sorted(entries)[1:])