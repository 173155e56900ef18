"""Count lines, words and blanks in a text file."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path

_SEPARATORS = " \n"


@dataclass(frozen=True)
class TextStats:
    """Counts gathered from a piece of text."""

    lines: int
    words: int
    blanks: int

    @property
    def total(self) -> int:
        """Words and blanks together."""
        return self.words + self.blanks


def count_text(text: str) -> TextStats:
    """Count newlines, spaces and words in ``text``.

    A word is counted when a space or newline follows it, so a last word
    with nothing after it is not counted.
    """
    words = 0
    previous = "\n"
    for char in text:
        if char in _SEPARATORS and previous not in _SEPARATORS:
            words += 1
        previous = char
    return TextStats(lines=text.count("\n"), words=words, blanks=text.count(" "))


def count_file(path: str | os.PathLike) -> TextStats:
    """Count the text stored in the file at ``path``."""
    return count_text(Path(path).read_text(encoding="utf-8", errors="replace"))


def main(argv=None) -> int:
    """Print the counts for a file, followed by its contents."""
    parser = argparse.ArgumentParser(
        prog="tinkerbox-wc", description="Count lines, words and blanks."
    )
    parser.add_argument("path")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"cannot read {args.path}: {exc}", file=sys.stderr)
        return 1
    stats = count_text(text)
    print(
        f"lines: {stats.lines}  words: {stats.words}  blank :{stats.blanks}\n"
        f"TOTAL:{stats.total}\n"
    )
    print(text, end="")
    return 0