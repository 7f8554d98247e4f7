"""Command-line entry point: pick the Chinese or English engine and search a file."""

from __future__ import annotations

import argparse
import io
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from . import chinese, english

EXIT_CHOICE = -1
CHINESE_CHOICE = 1
ENGLISH_CHOICE = 0

_INTEGER = re.compile(r"[+-]?\d+")

_BANNER = (
    "程序启动成功，欢迎使用俊杰5.0双语搜索引擎系统",
    "The program has started successfully, welcome to the Junjie 5.0 bilingual search engine system",
    "",
    "请确认你的文件路径，切勿将中英文语段混用一个文件",
    "Please confirm your file path and do not mix Chinese and English paragraphs into one file",
    "",
    "",
    "请选择引擎版本，中文版请输入1；英文版则为0；退出请输入-1。",
    "Please select engine version, Chinese version please enter 1; "
    "The English version is 0; To exit, enter -1.",
    "",
    "开发者才疏学浅，若有不足之处请多包涵。",
    "",
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="junjie-search",
        description="Bilingual sentence search over a text file.",
    )
    parser.add_argument(
        "--chinese-file",
        default="testChi.txt",
        help="UTF-8 file searched by the Chinese engine (default: %(default)s)",
    )
    parser.add_argument(
        "--english-file",
        default="test.txt",
        help="file searched by the English engine (default: %(default)s)",
    )
    return parser


def _read_choice(stream: TextIO) -> tuple[int | None, str]:
    """Read the leading integer of the first non-blank line.

    Returns the integer (None if the line does not start with one, or input
    ended) and the rest of that line.
    """
    while line := stream.readline():
        stripped = line.lstrip()
        if not stripped:
            continue
        match = _INTEGER.match(stripped)
        if match is None:
            return None, ""
        return int(match.group()), stripped[match.end():]
    return None, ""


def main(argv: Sequence[str] | None = None) -> int:
    """Show the menu, read the engine choice from stdin and run that engine."""
    args = _parser().parse_args(argv)
    stdin, stdout, stderr = sys.stdin, sys.stdout, sys.stderr

    for line in _BANNER:
        print(line, file=stdout)

    choice, rest = _read_choice(stdin)
    parsed = choice is not None
    if choice is None:
        # An unreadable choice counts as 0, with no further input available.
        choice = ENGLISH_CHOICE

    if choice != EXIT_CHOICE:
        print("正在进入子程序......", file=stdout)
    print(file=stdout)
    print(file=stdout)

    if choice == CHINESE_CHOICE:
        # The remainder of the choice line is discarded; the keyword is the next line.
        try:
            chinese.run(args.chinese_file, stdin, stdout)
        except OSError:
            print(f"无法打开文件: {args.chinese_file}", file=stderr)
            return 1
        return 0

    if choice == ENGLISH_CHOICE:
        if not parsed:
            keyword_source: TextIO = io.StringIO("")
        elif rest.split():
            keyword_source = io.StringIO(rest)
        else:
            keyword_source = stdin
        try:
            english.run(args.english_file, keyword_source, stdout)
        except OSError:
            print("Error: Could not open the file.", file=stderr)
        return 0

    if choice == EXIT_CHOICE:
        return EXIT_CHOICE

    return 0


if __name__ == "__main__":
    sys.exit(main())