from configparser import ConfigParser

import pytest

from utils.config import Config


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[FILES]\nENCODING = utf-8\n\n"
        "[CLOUD]\nSTYLESHEETS = tagcloud.css\n\n"
        f"[LOGGING]\nLOGDIR = {tmp_path / 'Logs'}\n",
        encoding="utf-8")
    return path


@pytest.fixture
def config(config_file):
    cparser = ConfigParser()
    cparser.read(config_file)
    return Config(cparser)


@pytest.fixture
def text_file(tmp_path):
    def write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return write
