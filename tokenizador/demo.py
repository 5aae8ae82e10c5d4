"""Small demonstration of the delimiter tokenizer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tokenizador.delimiter_tokenizer import DelimiterTokenizer


def format_tokens(tokens: Iterable[str]) -> str:
    """Render tokens each followed by a comma and a space."""
    return "".join(f"{token}, " for token in tokens)


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize a fixed sample sentence and print the result."""
    tokenizer = DelimiterTokenizer(". /")
    print(tokenizer)
    print(format_tokens(tokenizer.tokenize("MS DOS OS 2 high low")))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())