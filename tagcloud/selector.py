"""
selector.py - Top-N Word Selection

Picks the words shown in the cloud:
- Orders every (word, count) entry by count, highest first
- Keeps the first N entries of that ordering
- Re-sorts the kept entries alphabetically for display

Equal counts are broken alphabetically so the chosen set never depends
on dict iteration order.
"""

from wordcount import Entry, by_count


class InvalidSelectionCount(ValueError):
    """Requested word count is outside [0, number of distinct words]."""


def validate_count(num, distinct):
    """Raise InvalidSelectionCount unless 0 <= num <= distinct."""
    if isinstance(num, bool) or not isinstance(num, int):
        raise InvalidSelectionCount(f"word count must be an integer, got {num!r}")
    if not 0 <= num <= distinct:
        raise InvalidSelectionCount(
            f"word count {num} must be between 0 and {distinct}")


def by_word(entry):
    """Sort key: word ascending, ignoring case."""
    return (entry.word.lower(), entry.word)


def top_entries(frequencies, num):
    """
    Return the num most frequent entries, most frequent first.

    Args:
        frequencies: word -> count mapping
        num: how many entries to keep

    Raises:
        InvalidSelectionCount: if num is out of range
    """
    validate_count(num, len(frequencies))
    entries = sorted(
        (Entry(word, count) for word, count in frequencies.items()),
        key=by_count)
    return entries[:num]


def select(frequencies, num):
    """Return the num most frequent entries in alphabetical order."""
    return sorted(top_entries(frequencies, num), key=by_word)
