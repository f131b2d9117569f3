"""
fonts.py - Count to Font-Size Mapping

Scales each selected word's count linearly onto the font-size classes
MIN_FONT..MAX_FONT. The least frequent selected word gets MIN_FONT and
the most frequent gets MAX_FONT. When every selected word has the same
count they all get MAX_FONT.
"""

MAX_FONT = 48
MIN_FONT = 11


def count_range(entries):
    """Return (min, max) count over entries, or (0, 0) when empty."""
    counts = [entry.count for entry in entries]
    if not counts:
        return 0, 0
    return min(counts), max(counts)


def font_size(count, min_count, max_count):
    effective_min = min_count
    # Equal bounds would divide by zero
    if min_count == max_count:
        effective_min -= 1
    return ((MAX_FONT - MIN_FONT) * (count - effective_min)
            // (max_count - effective_min)) + MIN_FONT


def map_fonts(entries, min_count=None, max_count=None):
    """
    Build a word -> font-size class mapping for entries.

    Args:
        entries: selected (word, count) entries, in any order
        min_count: lowest count of the selection (computed when omitted)
        max_count: highest count of the selection (computed when omitted)

    Returns:
        dict with exactly one font size per word in entries
    """
    if not entries:
        return {}
    if min_count is None or max_count is None:
        low, high = count_range(entries)
        min_count = low if min_count is None else min_count
        max_count = high if max_count is None else max_count

    return {entry.word: font_size(entry.count, min_count, max_count)
            for entry in entries}
