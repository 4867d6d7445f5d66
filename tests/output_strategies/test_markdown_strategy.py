"""Unit tests for MarkdownOutputStrategy."""

import pytest

from file_lister.output_strategies.base_strategy import OutputStrategy
from file_lister.output_strategies.markdown_strategy import MarkdownOutputStrategy


@pytest.fixture
def strategy():
    return MarkdownOutputStrategy()


def test_is_output_strategy(strategy):
    assert isinstance(strategy, OutputStrategy)


def test_format_start(strategy):
    assert strategy.format_start("src/main.py", "python") == "- src/main.py:\n```python\n"


def test_format_start_without_language(strategy):
    assert strategy.format_start("notes.txt") == "- notes.txt:\n```\n"


def test_format_content_is_unchanged(strategy):
    content = "line one\r\nline two\n\n```nested fence```\n"
    assert strategy.format_content(content) == content


def test_format_end(strategy):
    assert strategy.format_end() == "\n```\n\n"


def test_complete_block(strategy):
    block = strategy.format_start("a.rs", "rust") + strategy.format_content("fn main() {}") + strategy.format_end()
    assert block == "- a.rs:\n```rust\nfn main() {}\n```\n\n"


def test_base_strategy_is_abstract():
    with pytest.raises(TypeError):
        OutputStrategy()
