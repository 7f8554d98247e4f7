"""Sentence search over English text, indexed word by word."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from typing import TextIO

from .index import ChainedIndex, table_size

logger = logging.getLogger(__name__)

_TERMINATORS = frozenset(".!?")
_DROPPED = frozenset("\n'\"")

IGNORED_SYMBOLS = frozenset(".!?,;:'\"-()[]{}<>/\\@#$%^&*_+=~|")


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def split_sentences(text: str) -> list[str]:
    """Split text after each . ! or ?, dropping newlines and quote marks."""
    sentences: list[str] = []
    current = ""
    for ch in text:
        if ch in _DROPPED:
            continue
        current += ch
        if current == " ":
            current = ""
        if ch in _TERMINATORS:
            sentences.append(current)
            current = ""
    if current:
        sentences.append(current)
    return sentences


def extract_words(sentences: Iterable[str]) -> list[tuple[str, int]]:
    """Return each space-separated word, stripped of symbols, with its sentence number."""
    words: list[tuple[str, int]] = []
    for number, sentence in enumerate(sentences):
        cleaned = "".join(ch for ch in sentence if ch not in IGNORED_SYMBOLS)
        words.extend((word, number) for word in cleaned.split(" ") if word)
    return words


def djb_hash(word: str, size: int) -> int:
    """DJB2 hash over the UTF-8 bytes as signed chars, 32-bit wrapping, reduced mod ``size``."""
    value = 5381
    for byte in word.encode("utf-8", "surrogateescape"):
        signed = byte - 256 if byte > 127 else byte
        value = _wrap32(value * 33 + signed)
    return abs(value) % size


def build_index(sentences: Sequence[str]) -> ChainedIndex:
    """Index every word of the sentences."""
    entries = extract_words(sentences)
    index = ChainedIndex(table_size(len(entries)), djb_hash)
    index.insert(entries)
    return index


def find_sentences(sentences: Sequence[str], index: ChainedIndex, word: str) -> list[str]:
    """Return the sentences in which ``word`` occurs, in first-seen order."""
    found = []
    for number in index.lookup(word):
        if 0 <= number < len(sentences):
            found.append(sentences[number])
        else:
            logger.error("Index %d is out of bounds for the sentence list.", number)
    return found


def _first_token(instream: TextIO) -> str:
    for line in instream:
        tokens = line.split()
        if tokens:
            return tokens[0]
    return ""


def run(path: str, instream: TextIO, outstream: TextIO) -> list[str]:
    """Interactive English search: index ``path``, read one keyword, print matches.

    Returns the matching sentences; raises OSError if the file cannot be read.
    """

    def say(line: str = "") -> None:
        print(line, file=outstream)

    start = time.perf_counter()
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        text = handle.read()
    say(f"Prepare time: {time.perf_counter() - start:g} seconds")
    say()

    sentences = split_sentences(text)
    index = build_index(sentences)

    say("Welcome to the JunJie research engine 3.0(for English user)!")
    say()
    say("Your input file has been successfully opened.")
    say("Please enter your keywords.")
    say()

    word = _first_token(instream)
    say()

    start = time.perf_counter()
    matches = find_sentences(sentences, index, word)
    for sentence in matches:
        say(sentence)
        say()
    if not matches:
        say("Sorry, there is no sentence matching your keyword in the text.")

    say(f"Execute time: {time.perf_counter() - start:g} seconds")
    say()
    say()
    return matches