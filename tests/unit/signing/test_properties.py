"""Tests for the .properties reader."""

import pytest

from signing_gate.build.config.exceptions import (
    ConfigException,
    PropertiesReadException,
    PropertiesSyntaxException,
)
from signing_gate.build.config.properties import parse_properties, load_properties


def test_separators():
    text = "a=1\nb = 2\nc:3\nd 4\n"
    assert parse_properties(text) == {"a": "1", "b": "2", "c": "3", "d": "4"}


def test_comments_and_blank_lines_are_ignored():
    text = "# comment\n! also a comment\n\n   \n  keyAlias=upload\n"
    assert parse_properties(text) == {"keyAlias": "upload"}


def test_line_continuation_joins_lines():
    text = "storeFile=/home/dev/\\\n        upload-keystore.jks\nkeyAlias=upload\n"
    assert parse_properties(text) == {
        "storeFile": "/home/dev/upload-keystore.jks",
        "keyAlias": "upload",
    }


def test_escaped_trailing_backslash_is_not_a_continuation():
    text = "dir=C:\\\\\nkeyAlias=upload\n"
    assert parse_properties(text) == {"dir": "C:\\", "keyAlias": "upload"}


def test_escapes():
    text = "name=Caf\\u00e9\nmsg=one\\ntwo\nmy\\=key=value\n"
    assert parse_properties(text) == {
        "name": "Café",
        "msg": "one\ntwo",
        "my=key": "value",
    }


def test_empty_values_are_present():
    properties = parse_properties("keyPassword=\nstorePassword\n")
    assert properties == {"keyPassword": "", "storePassword": ""}


def test_last_duplicate_wins():
    assert parse_properties("keyAlias=first\nkeyAlias=second\n") == {"keyAlias": "second"}


def test_crlf_line_endings():
    assert parse_properties("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}


def test_malformed_unicode_escape():
    with pytest.raises(PropertiesSyntaxException) as exc_info:
        parse_properties("ok=1\nbad=\\u12\n")
    assert exc_info.value.line_number == 2
    assert isinstance(exc_info.value, ConfigException)


def test_load_reads_latin1(tmp_path):
    path = tmp_path / "key.properties"
    path.write_bytes(b"storePassword=p\xe4ss\n")
    assert load_properties(path) == {"storePassword": "päss"}


def test_load_missing_file(tmp_path):
    path = tmp_path / "key.properties"
    with pytest.raises(PropertiesReadException) as exc_info:
        load_properties(path)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert exc_info.value.properties_file == str(path)


def test_load_directory_is_a_config_error(tmp_path):
    path = tmp_path / "key.properties"
    path.mkdir()
    with pytest.raises(ConfigException) as exc_info:
        load_properties(path)
    assert isinstance(exc_info.value, PropertiesReadException)
    assert str(path) in exc_info.value.guidance


def test_load_unknown_encoding_is_a_config_error(tmp_path):
    path = tmp_path / "key.properties"
    path.write_text("keyAlias=upload\n")
    with pytest.raises(PropertiesReadException):
        load_properties(path, encoding="no-such-codec")


def test_load_undecodable_content_is_a_config_error(tmp_path):
    path = tmp_path / "key.properties"
    path.write_bytes(b"storePassword=p\xe4ss\n")
    with pytest.raises(PropertiesReadException):
        load_properties(path, encoding="utf-8")


def test_load_reports_file_on_syntax_error(tmp_path):
    path = tmp_path / "key.properties"
    path.write_text("keyAlias=\\uZZZZ\n")
    with pytest.raises(PropertiesSyntaxException) as exc_info:
        load_properties(path)
    assert exc_info.value.properties_file == str(path)
    assert "line 1" in exc_info.value.guidance
