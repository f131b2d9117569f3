"""
tagcloud/__init__.py - Tag Cloud Orchestrator

Runs one tag cloud generation:
- Counts the words of the input file
- Selects the N most frequent words, alphabetically ordered
- Assigns each a font-size class
- Hands the result to the renderer and writes the page

Key role: High-level coordinator that ties together counter, selector,
font mapper and renderer
"""

from utils import get_logger
from wordcount import count_words_in_file
from renderer import write_tag_cloud
from tagcloud.selector import top_entries, by_word
from tagcloud.fonts import count_range, map_fonts


class TagCloud(object):
    """
    Single-run tag cloud generator.

    Owns the word counts of one input file. Nothing is written until the
    counts have been read completely.
    """

    def __init__(self, config, input_file, output_file,
                 counter=count_words_in_file, writer=write_tag_cloud):
        """
        Initialize the generator.

        Args:
            config: Configuration object (encoding, stylesheets, log_dir)
            input_file: Path of the text to analyse
            output_file: Path of the HTML page to write
            counter: Word counting function (for testing)
            writer: Page writing function (for testing)
        """
        self.config = config
        self.input_file = input_file
        self.output_file = output_file
        self.logger = get_logger("TAGCLOUD", log_dir=config.log_dir)
        self.counter = counter
        self.writer = writer
        self.frequencies = None

    def load(self):
        """
        Count the words of the input file, replacing any earlier counts.

        Returns:
            Number of distinct words

        Raises:
            InputReadError: if the input cannot be read; earlier counts
                are discarded as well
        """
        # Drop earlier counts even if this read fails
        self.frequencies = None
        self.frequencies = self.counter(self.input_file, self.config.encoding)
        self.logger.info(
            f"Counted {len(self.frequencies)} distinct words in {self.input_file}.")
        return len(self.frequencies)

    @property
    def distinct_words(self):
        if self.frequencies is None:
            raise RuntimeError("load() must be called before using word counts")
        return len(self.frequencies)

    def build(self, num):
        """
        Select the num most frequent words and size them.

        Returns:
            (selection, fonts): alphabetically ordered entries and the
            word -> font-size class mapping
        """
        if self.frequencies is None:
            raise RuntimeError("load() must be called before build()")

        ranked = top_entries(self.frequencies, num)
        # Range is taken before the alphabetical re-sort
        min_count, max_count = count_range(ranked)
        selection = sorted(ranked, key=by_word)
        fonts = map_fonts(selection, min_count, max_count)
        return selection, fonts

    def write(self, num, selection, fonts):
        self.writer(self.output_file, self.input_file, num, selection, fonts,
                    self.config.stylesheets, self.config.encoding)
        self.logger.info(
            f"Wrote tag cloud of {num} words to {self.output_file}.")

    def start(self, num):
        """Run the whole pipeline for num words and write the page."""
        if self.frequencies is None:
            self.load()
        selection, fonts = self.build(num)
        self.write(num, selection, fonts)
        return selection, fonts
