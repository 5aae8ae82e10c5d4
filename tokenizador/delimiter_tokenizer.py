"""Split text into tokens separated by any character from a set of delimiters."""

from __future__ import annotations

import dataclasses
import os
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import groupby

DEFAULT_DELIMITERS = ",;:.-/+*\\ '\"{}[]()<>¡!¿?&#=\t\n\r@"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _read_text(path: str) -> str:
    with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as handle:
        return handle.read()


@dataclass
class DelimiterTokenizer:
    """Tokenizer whose word boundaries are the characters in ``delimiters``."""

    delimiters: str = DEFAULT_DELIMITERS

    def __str__(self) -> str:
        return f"DELIMITADORES: {self.delimiters}"

    def copy(self) -> DelimiterTokenizer:
        """Return an independent tokenizer with the same delimiters."""
        return dataclasses.replace(self)

    def add_delimiters(self, new_delimiters: str) -> None:
        """Append the characters of ``new_delimiters`` not already present."""
        for char in new_delimiters:
            if char not in self.delimiters:
                self.delimiters += char

    def tokenize(self, text: str) -> list[str]:
        """Return the maximal runs of non-delimiter characters in ``text``."""
        delimiters = set(self.delimiters)
        return [
            "".join(run)
            for is_delimiter, run in groupby(text, key=delimiters.__contains__)
            if not is_delimiter
        ]

    def _file_tokens(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            if line:
                yield from self.tokenize(line)

    def tokenize_file(self, source: str, target: str) -> bool:
        """Write the tokens of ``source`` to ``target``, one per line.

        Returns False, after a message on stderr, if either file cannot be used.
        """
        try:
            output = open(target, "w", encoding=_ENCODING, errors=_ERRORS, newline="")
        except OSError as exc:
            _report(f"ERROR: No se puede escribir el archivo: {target} ({exc.strerror})")
            return False
        with output:
            try:
                text = _read_text(source)
            except OSError:
                _report(f"ERROR: No existe el archivo: {source}")
                return False
            for token in self._file_tokens(text.split("\n")):
                output.write(token + "\n")
        return True

    def tokenize_to_tk(self, source: str) -> bool:
        """Tokenize ``source`` into a file of the same name with ``.tk`` appended."""
        return self.tokenize_file(source, source + ".tk")

    def _tokenize_all(self, paths: Iterable[str]) -> bool:
        results = [self.tokenize_to_tk(path) for path in paths]
        return all(results)

    def tokenize_file_list(self, list_path: str) -> bool:
        """Tokenize every file named on a newline-terminated line of ``list_path``."""
        try:
            content = _read_text(list_path)
        except OSError:
            _report(f"ERROR: No existe el archivo: {list_path}")
            return False
        return self._tokenize_all(content.split("\n")[:-1])

    def tokenize_directory(self, directory: str) -> bool:
        """Tokenize every regular file below ``directory``, following links."""
        if not os.path.isdir(directory):
            return False
        found = []
        for root, _dirs, files in os.walk(directory, followlinks=True):
            paths = (os.path.join(root, name) for name in files)
            found.extend(path for path in paths if os.path.isfile(path))
        return self._tokenize_all(sorted(found))