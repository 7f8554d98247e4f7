# junjie-search

A small bilingual search engine for plain-text files. It splits a text into
sentences, indexes them in a chained hash table and prints every sentence that
matches what you type.

- **Chinese mode** indexes individual characters. Sentences end at `。`, `！`
  or `？` outside quotes and half-width brackets. Your query is split into
  characters, the sentences holding all of them are found through the index,
  and only those that contain the query as a contiguous run are printed.
- **English mode** indexes whole words. Sentences end after `.`, `!` or `?`;
  newlines and quote marks are dropped. Your query is a single word (the first
  whitespace-separated token you type) and every sentence containing it is
  printed. Matching is case-sensitive.

Punctuation is ignored when building the index. Keep Chinese and English text
in separate files.

## Installation

```
pip install .
```

## Usage

Run the interactive program:

```
junjie-search
```

Options:

- `--chinese-file PATH` – UTF-8 file searched by the Chinese engine
  (default: `testChi.txt` in the current directory)
- `--english-file PATH` – file searched by the English engine
  (default: `test.txt` in the current directory)

After a banner it reads an engine choice from standard input:

- `1` – Chinese engine; the keywords are read from the next line
- `0` – English engine; the keyword may follow on the same line or come next
- `-1` – exit (exit status -1)

Input that does not start with a number is treated as `0`, with no keyword.

The engine reports how long preparation and the search took and prints each
matching sentence, or says that nothing matched. If the Chinese file cannot be
opened, an error is printed and the exit status is 1; if the English file
cannot be opened, an error is printed and the program ends normally.

## Library use

The building blocks are available from Python:

```python
from junjie_search import english, chinese

sentences = english.split_sentences("The cat sat. A dog ran! Where is the cat?")
index = english.build_index(sentences)
print(english.find_sentences(sentences, index, "cat"))
# ['The cat sat.', 'Where is the cat?']

zh = chinese.split_sentences("今天天气很好。我们去公园吧！")
zh_index = chinese.build_index(zh)
print(chinese.find_sentences(zh, zh_index, "公园"))
# ['我们去公园吧！']
```

Both modules also offer `run(path, instream, outstream)`, which performs one
interactive search against the given streams and returns the matching
sentences. `chinese.search` returns the sentence numbers that hold every
keyword character, and `chinese.contains_substring` checks for a contiguous
match. The hash functions are `chinese.multiplicative_hash` and
`english.djb_hash`.

`junjie_search.index` provides the underlying `ChainedIndex` hash table
(`insert`, `lookup`, `in`, `len`, `buckets`) along with the `table_size` and
`intersect` helpers.

## Limitations

The index is built in memory on every run and is not saved. Each run answers a
single query against a single file.

## Running the tests

```
pip install .[test]
pytest
```