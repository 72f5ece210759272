"""
配置模块测试
"""

import zipfile

import pytest

from zipunit import Config, ConfigurationError, load_config
from zipunit.config import DEFAULT_CONFIG, write_default_config


def test_default_config():
    config = load_config()
    assert config == Config()
    assert config.encoding == "utf-8"
    assert config.buffer_size == 1024
    assert config.compress_type() == zipfile.ZIP_DEFLATED
    assert DEFAULT_CONFIG == config


def test_load_from_file(tmp_path):
    path = tmp_path / "zipunit.toml"
    path.write_text(
        '[builder]\nencoding = "latin-1"\nbuffer_size = 64\ncompression = "STORED"\n\n'
        "[inspector]\npreview_limit = 5\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.encoding == "latin-1"
    assert config.buffer_size == 64
    assert config.compress_type() == zipfile.ZIP_STORED
    assert config.preview_limit == 5


def test_missing_keys_keep_defaults(tmp_path):
    path = tmp_path / "zipunit.toml"
    path.write_text("[builder]\nbuffer_size = 4096\n", encoding="utf-8")
    config = load_config(path)
    assert config.buffer_size == 4096
    assert config.compression == "deflated"
    assert config.preview_limit == 20


def test_write_default_config(tmp_path):
    target = write_default_config(tmp_path / "nested" / "zipunit.toml")
    assert target.is_file()
    assert load_config(target) == Config()


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.toml")


def test_invalid_toml(tmp_path):
    path = tmp_path / "zipunit.toml"
    path.write_text("[builder\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


@pytest.mark.parametrize(
    "config",
    [
        Config(compression="rar"),
        Config(buffer_size=0),
        Config(preview_limit=-1),
        Config(encoding="no-such-encoding"),
    ],
)
def test_invalid_values(config):
    with pytest.raises(ConfigurationError):
        config.validate()


def test_encode():
    assert Config().encode("é") == b"\xc3\xa9"
    assert Config(encoding="latin-1").encode("é") == b"\xe9"
