# Word frequency counting for the tag cloud generator

import sys
from collections import namedtuple

SEPARATORS = frozenset(" \t\n\r,-.!?[]';:/()")

Token = namedtuple("Token", ["text", "is_separator"])
Entry = namedtuple("Entry", ["word", "count"])


def by_count(entry):
    """Sort key: count descending, then word ascending."""
    return (-entry.count, entry.word)


class InputReadError(OSError):
    """The input text could not be opened or read to the end."""


def is_separator(char):
    return char in SEPARATORS


def next_word_or_separator(text, position):
    """
    Return the maximal run of either separator or non-separator characters
    in text starting at position, whichever class text[position] is in.

    Runtime Complexity: O(k) where k is the length of the returned run.
    """
    if not 0 <= position < len(text):
        raise ValueError(
            f"position {position} outside text of length {len(text)}")

    sep = is_separator(text[position])
    end = position
    while end < len(text) and is_separator(text[end]) == sep:
        end += 1
    return text[position:end]


def next_token(text, position):
    run = next_word_or_separator(text, position)
    return Token(run, is_separator(run[0]))


def tokenize_line(line):
    """
    Yield the tokens of a line in order. Joining their text gives the line
    back exactly.

    Runtime Complexity: O(n) where n is the length of the line.
    """
    position = 0
    while position < len(line):
        token = next_token(line, position)
        yield token
        position += len(token.text)


def compute_word_frequencies(lines):
    """
    Count lower-cased words across all lines. Separator runs are dropped.
    A new dict is built on every call.

    Runtime Complexity: O(N) where N is the total number of characters.
    """
    frequencies = {}
    for line in lines:
        for token in tokenize_line(line):
            if token.is_separator:
                continue
            word = token.text.lower()
            frequencies[word] = frequencies.get(word, 0) + 1
    return frequencies


def count_words_in_file(file_path, encoding="utf-8"):
    """
    Read file_path line by line and return its word frequencies.

    Raises InputReadError if the file cannot be opened or a read fails
    part way through; no partial counts are returned in that case.
    """
    try:
        with open(file_path, "r", encoding=encoding) as file:
            return compute_word_frequencies(file)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read file '{file_path}': {e}") from e


def sort_by_frequency(frequencies):
    """
    Runtime Complexity: O(n log n) where n is the number of distinct words.
    """
    entries = [Entry(word, count) for word, count in frequencies.items()]
    entries.sort(key=by_count)
    return entries


def print_frequencies(frequencies, out=None):
    out = out if out is not None else sys.stdout
    for word, count in sort_by_frequency(frequencies):
        out.write(f"{word}\t{count}\n")


def main(argv):
    """
    List every word of a text file with its count, most frequent first.
    """
    if len(argv) != 2:
        sys.stderr.write("Usage: python wordcount.py <text_file>\n")
        return 2

    try:
        frequencies = count_words_in_file(argv[1])
    except InputReadError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    print_frequencies(frequencies)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
