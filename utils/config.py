"""
utils/config.py - Run Configuration

Wraps a ConfigParser loaded from config.ini. Every key is optional;
blank file names and word counts mean "ask the user".
"""

DEFAULT_STYLESHEETS = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
)


class ConfigError(ValueError):
    """A config.ini value cannot be used."""


def log_dir_of(config):
    """LOGDIR from a ConfigParser, usable even when the rest of the file is bad."""
    return config.get("LOGGING", "LOGDIR", fallback="").strip() or "Logs"


class Config(object):
    def __init__(self, config):
        files = config["FILES"] if config.has_section("FILES") else {}
        cloud = config["CLOUD"] if config.has_section("CLOUD") else {}

        self.input_file = files.get("INPUTFILE", "").strip() or None
        self.output_file = files.get("OUTPUTFILE", "").strip() or None
        self.encoding = files.get("ENCODING", "").strip() or "utf-8"

        word_count = cloud.get("WORDCOUNT", "").strip()
        try:
            self.word_count = int(word_count) if word_count else None
        except ValueError as e:
            raise ConfigError(
                f"[CLOUD] WORDCOUNT must be an integer, got {word_count!r}") from e

        stylesheets = cloud.get("STYLESHEETS", "").strip()
        if stylesheets:
            self.stylesheets = tuple(
                sheet.strip() for sheet in stylesheets.split(",") if sheet.strip())
        else:
            self.stylesheets = DEFAULT_STYLESHEETS

        self.log_dir = log_dir_of(config)
