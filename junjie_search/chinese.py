"""Sentence search over Chinese text, indexed character by character."""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from typing import TextIO

from .index import ChainedIndex, intersect, table_size

_QUOTES = frozenset("”“’‘")
_TERMINATORS = frozenset("。！？")
_OPENERS = {"(": 0, "[": 1, "{": 2}
_CLOSERS = {")": 0, "]": 1, "}": 2}

IGNORED_SYMBOLS = frozenset(
    "，。！？、；：‘’“”（）《》【】『』「」〈〉—…·～﹏"
    ".!?,;:'\"-()[]{}<>/\\@#$%^&*_+=~|"
)

_GOLDEN = 0.6180339887
_FAILURE = "查找失败，该文件中未搜索到指定关键词。"


def read_text(path: str) -> str:
    """Read a UTF-8 text file whole."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def split_sentences(text: str) -> list[str]:
    """Split text at 。！？ that lie outside quotes and half-width brackets.

    A terminator directly followed by a quote mark takes the mark into the
    sentence and does not end it.
    """
    sentences: list[str] = []
    current = ""
    inside_quotes = False
    depth = [0, 0, 0]
    skip_next = False

    for position, ch in enumerate(text):
        if skip_next:
            skip_next = False
            continue
        if ch in _QUOTES:
            inside_quotes = not inside_quotes
        if ch in _OPENERS:
            depth[_OPENERS[ch]] += 1
        elif ch in _CLOSERS:
            depth[_CLOSERS[ch]] -= 1

        current += ch
        if current == "\n":
            current = ""
        if ch in (" ", "\n"):
            continue

        if not inside_quotes and not any(depth) and ch in _TERMINATORS:
            following = text[position + 1 : position + 2]
            if following in _QUOTES:
                current += following
                skip_next = True
            else:
                sentences.append(current)
                current = ""

    if current:
        sentences.append(current)
    return sentences


def extract_chars(sentences: Iterable[str]) -> list[tuple[str, int]]:
    """Return each indexable character with the number of its sentence."""
    return [
        (ch, number)
        for number, sentence in enumerate(sentences)
        for ch in sentence
        if ch != " " and ch not in IGNORED_SYMBOLS
    ]


def multiplicative_hash(key: str | int, size: int) -> int:
    """Bucket for a character by the golden-ratio multiplicative method."""
    code = ord(key) if isinstance(key, str) else key
    product = code * _GOLDEN
    fraction = product - int(product)
    return int(size * fraction)


def build_index(sentences: Sequence[str]) -> ChainedIndex:
    """Index every character of the sentences."""
    entries = extract_chars(sentences)
    index = ChainedIndex(table_size(len(entries)), multiplicative_hash)
    index.insert(entries)
    return index


def search(index: ChainedIndex, keywords: Iterable[str]) -> list[int]:
    """Return sentence numbers holding every keyword character, or []."""
    postings = []
    for ch in keywords:
        if ch not in index:
            return []
        postings.append(index.lookup(ch))
    return intersect(postings)


def contains_substring(text: str, keywords: Iterable[str]) -> bool:
    """Whether the keyword characters appear consecutively in ``text``."""
    return "".join(keywords) in text


def find_sentences(sentences: Sequence[str], index: ChainedIndex, keywords: Iterable[str]) -> list[str]:
    """Return the sentences that contain the keywords as a contiguous string."""
    query = "".join(keywords)
    return [sentences[number] for number in search(index, query) if query in sentences[number]]


def run(path: str, instream: TextIO, outstream: TextIO) -> list[str]:
    """Interactive Chinese search: index ``path``, read one keyword line, print matches.

    Returns the matching sentences; raises OSError if the file cannot be read.
    """

    def say(line: str = "") -> None:
        print(line, file=outstream)

    say("欢迎访问俊杰搜索引擎4.0(中文版)")
    say()
    say("矢勤矢勇，止戈长白")
    say()

    start = time.perf_counter()
    text = read_text(path)
    say("提供的输入文件已经成功打开。")

    sentences = split_sentences(text)
    index = build_index(sentences)

    say("搜索引擎部署完毕，请输入关键词")
    say()
    say(f"准备时间: {time.perf_counter() - start:g} 秒")

    keywords = instream.readline().rstrip("\r\n")
    start = time.perf_counter()
    say()

    if not search(index, keywords):
        say(_FAILURE)
        return []

    matches = find_sentences(sentences, index, keywords)
    for sentence in matches:
        say(sentence)
        say()

    say(f"查找时间: {time.perf_counter() - start:g} 秒")
    say("查找完毕，请阅览以上数据。" if matches else _FAILURE)
    return matches