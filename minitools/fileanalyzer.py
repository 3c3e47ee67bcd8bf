"""Character, word and line statistics for text files."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO, AnyStr

PROG_NAME = "file-analyzer"

# Lines are read in chunks of at most MAX_LINE_LENGTH - 1 bytes; a longer
# line is counted as several lines.
MAX_LINE_LENGTH = 2048
WORD_DELIMITERS = " \t\n\r.,;:!?\"'()[]{}<>&/"

_WORD_PATTERN = f"[^{re.escape(WORD_DELIMITERS)}]+"
_WORD_RE_STR = re.compile(_WORD_PATTERN)
_WORD_RE_BYTES = re.compile(_WORD_PATTERN.encode("ascii"))

SEPARATOR = "------------------------------------"


@dataclass
class FileStats:
    """Counts gathered from a file."""

    char_count: int = 0
    word_count: int = 0
    line_count: int = 0


def count_words(line: AnyStr) -> int:
    """Count the runs of non-delimiter characters in ``line``."""
    pattern = _WORD_RE_BYTES if isinstance(line, bytes) else _WORD_RE_STR
    return sum(1 for _ in pattern.finditer(line))


def analyze_stream(stream: IO[AnyStr]) -> FileStats:
    """Gather statistics from an open stream, reading it line by line."""
    stats = FileStats()
    while chunk := stream.readline(MAX_LINE_LENGTH - 1):
        nul = b"\0" if isinstance(chunk, bytes) else "\0"
        visible = chunk.split(nul, 1)[0]
        stats.line_count += 1
        stats.char_count += len(visible)
        stats.word_count += count_words(visible)
    return stats


def analyze_file(path: str) -> FileStats:
    """Gather statistics from the file at ``path``; OSError on failure."""
    with open(path, "rb") as stream:
        return analyze_stream(stream)


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime, by trial division over 6k +/- 1."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def format_analysis(filename: str, stats: FileStats) -> str:
    """Render the analysis report, ending with a newline."""
    lines = [
        f"--- File Analysis for '{filename}' ---",
        f"  Characters: {stats.char_count:<10}",
        f"  Words:      {stats.word_count:<10}",
        f"  Lines:      {stats.line_count:<10}",
        SEPARATOR,
    ]
    if stats.word_count > 1:
        if is_prime(stats.word_count):
            lines.append(
                f"Fun Fact: The word count ({stats.word_count}) is a prime number!"
            )
        else:
            lines.append(
                f"Fun Fact: The word count ({stats.word_count}) is not a prime number."
            )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Analyse the file named on the command line; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {PROG_NAME} <filename>", file=sys.stderr)
        print(
            "Analyzes a text file and reports statistics about it.", file=sys.stderr
        )
        return 1

    filename = args[0]
    try:
        stream = open(filename, "rb")
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    with stream:
        try:
            stats = analyze_stream(stream)
        except OSError as exc:
            print(f"Error reading from file: {exc.strerror}", file=sys.stderr)
            return 1

    sys.stdout.write(format_analysis(filename, stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())