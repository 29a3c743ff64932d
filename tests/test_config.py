import struct

import pytest

from searchcore.config import Config, ConfigError, parse_config


def _f32(value):
    return struct.unpack("f", struct.pack("f", value))[0]


def _write(tmp_path, name, content):
    directory = tmp_path / "config"
    directory.mkdir(exist_ok=True)
    (directory / name).write_text(content, encoding="utf-8")
    return Config(name, base_dir=directory)


BASIC = """tomato: potato
tomato2:potato2
  tomato3 :   potaot3
tomato4: pot
aa: ok
aaa: 34
aaaf: 53
a122: 122.34
s3: 0.85
d: 2
"""


def test_basic(tmp_path):
    config = _write(tmp_path, "Basic.conf", BASIC)
    assert config.get_string("tomato") == "potato"
    assert config.get_string("tomato2") == "potato2"
    assert config.get_string("tomato3") == "potaot3"
    assert config.get_string("tomato4") == "pot"
    assert config.get_string("aa") == "ok"
    assert config.get_string("aaa") == "34"
    assert config.get_string("aaaf") == "53"

    with pytest.raises(ConfigError):
        config.get_string("")
    with pytest.raises(ConfigError):
        config.get_string("non existent key")
    for key in ("tomato", "tomato2", "tomato3", "tomato4"):
        with pytest.raises(ConfigError):
            config.get_int(key)
    with pytest.raises(ConfigError):
        config.get_double("tomato3")

    assert config.get_string("non_existent_key", "3") == "3"
    assert config.get_int("aaa") == 34
    assert config.get_int("aaaf") == 53
    assert config.get_int("non_existent_key", 2) == 2

    assert config.get_double("a122") == 122.34
    assert config.get_double("s3") == 0.85
    assert config.get_double("d") == 2

    assert config.get_float("a122") == _f32(122.34)
    assert config.get_float("s3") == _f32(0.85)
    assert config.get_float("d") == 2


def test_parses_basic_key_value_pairs(tmp_path):
    config = _write(tmp_path, "ParsesBasicKeyValuePairs.conf", "name: John Doe\nage: 30\n")
    assert config.get_string("name") == "John Doe"
    assert config.get_int("age") == 30


def test_ignores_comments(tmp_path):
    text = "# a comment\nkey1: value1\n# key3: hidden\nkey2: value2\n"
    config = _write(tmp_path, "IgnoresComments.conf", text)
    assert config.get_string("key1") == "value1"
    assert config.get_string("key2") == "value2"
    assert "key3" not in config


def test_trims_whitespace(tmp_path):
    config = _write(tmp_path, "TrimsWhitespace.conf", "   key   :    value with spaces   \n")
    assert config.get_string("key") == "value with spaces"


def test_ignores_invalid_lines(tmp_path):
    config = _write(tmp_path, "IgnoresInvalidLines.conf", "invalid_line\nkey: value\n")
    with pytest.raises(ConfigError):
        config.get_string("invalid_line")
    assert config.get_string("key") == "value"


def test_overwrites_duplicate_keys(tmp_path):
    config = _write(tmp_path, "OverwritesDuplicateKeys.conf", "key: first\nkey: second\n")
    assert config.get_string("key") == "second"


def test_handles_inline_values(tmp_path):
    config = _write(tmp_path, "HandlesInlineValues.conf", "key: value#not_a_comment\n")
    assert config.get_string("key") == "value#not_a_comment"


def test_parses_integers(tmp_path):
    config = _write(tmp_path, "ParsesIntegers.conf", "count: 42\n")
    assert config.get_int("count") == 42
    assert config.get_int("count", 100) == 42


def test_handles_missing_keys(tmp_path):
    config = _write(tmp_path, "HandlesMissingKeys.conf", "present: yes\n")
    with pytest.raises(ConfigError):
        config.get_string("missing")
    assert config.get_string("missing", "default") == "default"
    assert config.get_int("missing", 99) == 99


def test_handles_multiple_colons(tmp_path):
    config = _write(tmp_path, "HandlesMultipleColons.conf", "path: /usr/local:/usr/bin\n")
    assert config.get_string("path") == "/usr/local:/usr/bin"


def test_handles_empty_value(tmp_path):
    config = _write(tmp_path, "HandlesEmptyValue.conf", "empty_val:\n")
    assert config.get_string("empty_val") == ""


def test_ignores_whitespace_only_lines(tmp_path):
    config = _write(tmp_path, "IgnoresWhitespaceOnlyLines.conf", "   \n\t\nkey: value\n  \n")
    assert config.get_string("key") == "value"


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        Config("nope.conf", base_dir=tmp_path)


def test_default_base_dir_is_config(tmp_path, monkeypatch):
    _write(tmp_path, "app.conf", "name: demo\n")
    monkeypatch.chdir(tmp_path)
    assert Config("app.conf").get_string("name") == "demo"


def test_crlf_lines():
    assert parse_config("a: 1\r\nb: 2\r\n") == {"a": "1", "b": "2"}


def test_from_text_and_contains():
    config = Config.from_text("alpha: beta\n")
    assert "alpha" in config
    assert "beta" not in config
    assert config.get_string("alpha") == "beta"


def test_int_out_of_range():
    config = Config.from_text("big: 99999999999\n")
    with pytest.raises(ConfigError):
        config.get_int("big")


def test_int_leading_digits():
    config = Config.from_text("n: 12abc\n")
    assert config.get_int("n") == 12