"""Unit tests for plain-text classification and language tags."""

import pytest

from file_lister.file_system_tree.text_classifier import (
    LANGUAGE_TAGS,
    PLAIN_TEXT_EXTENSIONS,
    is_plain_text_file,
    language_tag,
)


@pytest.mark.parametrize(
    "name", ["app.ts", "page.html", "style.scss", "notes.md", "main.py", "lib.rs", "build.sh", "conf.toml"]
)
def test_allow_listed_extensions_are_text(name):
    assert is_plain_text_file(name)


def test_extension_check_is_case_insensitive():
    assert is_plain_text_file("README.MD")
    assert is_plain_text_file("Main.PY")


def test_multi_dot_json_is_text():
    assert is_plain_text_file("a.b.json")
    assert language_tag("a.b.json") == "json"


def test_mime_fallback_text_types():
    # Not in the allow-list, but guessed as text/*
    assert ".csv" not in PLAIN_TEXT_EXTENSIONS
    assert is_plain_text_file("data.csv")


@pytest.mark.parametrize("name", ["logo.png", "archive.zip", "song.mp3", "document.pdf"])
def test_binary_types_are_not_text(name):
    assert not is_plain_text_file(name)


def test_unknown_type_is_not_text():
    assert not is_plain_text_file("LICENSE")
    assert not is_plain_text_file("data.unknownext")


def test_classification_ignores_contents(tmp_path):
    fake = tmp_path / "binary.py"
    fake.write_bytes(b"\x00\x01\x02")
    assert is_plain_text_file(fake)


def test_dotfile_has_no_extension():
    assert language_tag(".env") == ""
    assert language_tag("prod.env") == "dotenv"


@pytest.mark.parametrize(
    "name, tag",
    [
        ("a.ts", "typescript"),
        ("a.tsx", "typescript"),
        ("a.jsx", "javascript"),
        ("a.htm", "html"),
        ("a.sass", "scss"),
        ("a.hbs", "handlebars"),
        ("a.yml", "yaml"),
        ("a.markdown", "markdown"),
        ("a.rst", "restructuredtext"),
        ("a.rb", "ruby"),
        ("a.h", "cpp"),
        ("a.hpp", "cpp"),
        ("a.bash", "bash"),
        ("a.txt", ""),
        ("a.csv", ""),
        ("Makefile", ""),
    ],
)
def test_language_tags(name, tag):
    assert language_tag(name) == tag


def test_every_tagged_extension_is_allow_listed():
    assert set(LANGUAGE_TAGS) == set(PLAIN_TEXT_EXTENSIONS)
