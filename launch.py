"""
launch.py - Tag Cloud Generator Entry Point

Main entry point for the tag cloud generator.
Handles configuration loading, asking for whatever the command line
and config file leave out, and running the generator.

Usage:
    python launch.py                              # Prompt for everything
    python launch.py input.txt cloud.html -n 100  # No prompts
    python launch.py --config_file path           # Use custom config file
"""

import sys
from configparser import ConfigParser
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config, ConfigError, log_dir_of
from wordcount import InputReadError
from tagcloud import TagCloud
from tagcloud.selector import InvalidSelectionCount, validate_count


def prompt_path(message, input_func=input):
    """Ask until a non-blank path is entered."""
    path = ""
    while not path:
        path = input_func(message).strip()
    return path


def prompt_count(distinct, input_func=input):
    """
    Ask for the number of words in the cloud until the reply is an integer
    between 0 and distinct.
    """
    while True:
        reply = input_func(
            "Enter a positive number (less than the number of words in the "
            f"file: {distinct}) of words to be included in the tag cloud: ")
        try:
            num = int(reply.strip())
            validate_count(num, distinct)
        except ValueError:
            continue
        return num


def main(config_file, input_file=None, output_file=None, count=None,
         input_func=input):
    """
    Generate one tag cloud.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_file: Text file to analyse (prompted for when missing)
        output_file: HTML file to write (prompted for when missing)
        count: Number of words in the cloud (prompted for when missing)
        input_func: Prompt function (for testing)

    Returns:
        0 on success, 1 if the run was aborted, 2 for a bad word count or
        configuration
    """
    # Load configuration
    cparser = ConfigParser()
    cparser.read(config_file)
    logger = get_logger("LAUNCH", log_dir=log_dir_of(cparser))
    try:
        config = Config(cparser)
    except ConfigError as e:
        logger.error(f"Invalid configuration in {config_file}: {e}")
        return 2

    input_file = input_file or config.input_file or prompt_path(
        "Enter an input file: ", input_func)
    output_file = output_file or config.output_file or prompt_path(
        "Enter an output file: ", input_func)
    if count is None:
        count = config.word_count

    generator = TagCloud(config, input_file, output_file)
    try:
        distinct = generator.load()
    except InputReadError as e:
        logger.error(f"Invalid input file. Unable to read it: {e}")
        return 1

    if count is None:
        count = prompt_count(distinct, input_func)
    else:
        try:
            validate_count(count, distinct)
        except InvalidSelectionCount as e:
            logger.error(str(e))
            return 2

    try:
        generator.start(count)
    except OSError as e:
        logger.error(f"Invalid output file. Unable to write it: {e}")
        return 1
    return 0


def run(argv=None):
    parser = ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words "
                    "in a text file.")
    parser.add_argument("input_file", nargs="?", default=None,
                        help="Text file to analyse")
    parser.add_argument("output_file", nargs="?", default=None,
                        help="HTML file to write")
    parser.add_argument("-n", "--count", type=int, default=None,
                        help="Number of words in the tag cloud")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    args = parser.parse_args(argv)
    return main(args.config_file, args.input_file, args.output_file, args.count)


if __name__ == "__main__":
    sys.exit(run())
