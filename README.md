# tokenizador

This package splits text into words wherever a delimiter character appears.
You choose the set of delimiter characters. The package also tokenizes single
files, lists of files and directory trees. Each output file holds one token
per line.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Tokenizing strings

```python
from tokenizador.delimiter_tokenizer import DelimiterTokenizer

tok = DelimiterTokenizer(". /")
print(tok)                                  # DELIMITADORES: . /
print(tok.tokenize("MS DOS OS 2 high low")) # ['MS', 'DOS', 'OS', '2', 'high', 'low']

tok.add_delimiters("_ []")                  # appends only characters not already present
clone = tok.copy()                          # independent tokenizer, same delimiters
```

`DelimiterTokenizer` is a dataclass with one field, `delimiters`. If you leave
it out, the tokenizer uses the default set in `DEFAULT_DELIMITERS`. That set
holds common punctuation, brackets, quotes, `¡`, `¿`, whitespace and `@`.

`tokenize` returns the maximal runs of characters that are not delimiters.
Empty tokens are never produced.

## Tokenizing files

```python
tok.tokenize_file("input.txt", "output.txt")   # one token per line in output.txt
tok.tokenize_to_tk("notes.txt")                # writes notes.txt.tk
tok.tokenize_file_list("files.txt")            # each newline-terminated line names a file
tok.tokenize_directory("corpus")               # every regular file under corpus
```

- `tokenize_file` opens the target before it reads the source. If the source
  is missing, an empty target is left behind, a message goes to standard
  error, and the method returns `False`. It also returns `False` if the target
  cannot be written.
- `tokenize_to_tk` writes to the source name with `.tk` appended.
- `tokenize_file_list` handles each line of the list file that ends in a
  newline. A final line with no newline is ignored. Each named file goes to
  `tokenize_to_tk`.
- `tokenize_directory` walks the tree and follows symbolic links. It tokenizes
  the regular files in sorted path order with `tokenize_to_tk`. It returns
  `False` without a message if the path is not a directory.

These methods return `True` only when every file was processed.

## Accumulating variant

`tokenizador.accumulating_tokenizer.AccumulatingTokenizer` is a subclass of
`DelimiterTokenizer` that behaves differently in these ways:

- `tokenize_into(text, tokens)` appends the tokens of `text` to the list
  `tokens` and returns that same list.
- File tokenization does not write each line's tokens only once. After each
  non-empty line it writes every token gathered so far in the file.
- `tokenize_file_list` skips the first line of the list file.
- Both `tokenize_file_list` and `tokenize_directory` name each output after
  the part of the input path before its first dot, with `.tk` added.
- `tokenize_directory` also lists the subdirectories under the directory. It
  cannot tokenize those entries, so each one counts as a failure.

## Demo

```
tokenizador-demo
```

The demo tokenizes the sentence `MS DOS OS 2 high low` using the delimiters
`. /`. It prints the tokenizer first. Then it prints the tokens, each followed
by `, `. You can also call `tokenizador.demo.format_tokens` directly to get
that rendering.

## What it does not do

The only command is the fixed demo. No command-line tool tokenizes a file or
directory that you choose; to do that, call the classes from Python. The
tokenizer has no special handling of URLs, e-mail addresses, numbers or
acronyms, and it does not convert text to lower case.