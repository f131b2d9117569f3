from tagcloud.fonts import MAX_FONT, MIN_FONT, count_range, font_size, map_fonts
from tagcloud.selector import select
from wordcount import Entry, compute_word_frequencies


def test_font_bounds():
    assert (MIN_FONT, MAX_FONT) == (11, 48)


def test_equal_counts_all_get_largest_font():
    entries = [Entry("a", 5), Entry("b", 5), Entry("c", 5)]
    assert map_fonts(entries) == {"a": 48, "b": 48, "c": 48}


def test_single_word_gets_largest_font():
    assert map_fonts([Entry("only", 1)]) == {"only": MAX_FONT}


def test_extremes_map_to_bounds():
    assert map_fonts([Entry("often", 10), Entry("rare", 1)]) == {
        "often": 48, "rare": 11,
    }


def test_sizes_are_floored_linear_interpolation():
    # 37 * (4 - 1) / (10 - 1) = 12.33
    assert font_size(4, 1, 10) == 23
    assert font_size(7, 1, 10) == 35


def test_sizes_stay_within_bounds():
    entries = [Entry(str(count), count) for count in range(3, 40)]
    sizes = map_fonts(entries).values()
    assert min(sizes) == MIN_FONT
    assert max(sizes) == MAX_FONT


def test_explicit_range_is_used():
    assert map_fonts([Entry("a", 5)], min_count=1, max_count=9) == {"a": 29}


def test_empty_selection_maps_to_empty_dict():
    assert map_fonts([]) == {}
    assert count_range([]) == (0, 0)


def test_count_range():
    assert count_range([Entry("a", 2), Entry("b", 9), Entry("c", 4)]) == (2, 9)


def test_small_text_from_counts_to_fonts():
    frequencies = compute_word_frequencies(["a a b b b c"])
    assert frequencies == {"a": 2, "b": 3, "c": 1}
    selection = select(frequencies, 2)
    assert selection == [Entry("a", 2), Entry("b", 3)]
    assert map_fonts(selection) == {"a": MIN_FONT, "b": MAX_FONT}
