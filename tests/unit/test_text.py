"""Unit tests for the Text string helpers."""

from __future__ import annotations

import pytest

from support import Text
from support.Config import settings


class TestText:
    """Test suite for Text."""

    @pytest.mark.parametrize("input_value,expected", [
        ('', ''),
        ('hello', 'Hello'),
        ('hello world', 'Hello World'),
        ('HELLO WORLD', 'Hello World'),
        ('hELLo wORLd', 'Hello World'),
        ("it's done", "It's Done"),
    ])
    def test_to_title_case(self, input_value: str, expected: str) -> None:
        """Test Title Case conversion."""
        assert Text.to_title_case(input_value) == expected

    @pytest.mark.parametrize("input_value,expected", [
        ('', ''),
        ('hello', 'hello'),
        ('hello world', 'hello-world'),
        ('hello_world', 'hello-world'),
        ('hello__world', 'hello-world'),
        ('  hello world', 'hello-world'),
        ('helloWorld', 'hello-world'),
    ])
    def test_to_kebab_case(self, input_value: str, expected: str) -> None:
        """Test kebab-case conversion."""
        assert Text.to_kebab_case(input_value) == expected

    @pytest.mark.parametrize("input_value,expected", [
        ('', ''),
        ('hello', 'hello'),
        ('helloWorld', 'hello_world'),
        ('HelloWorld', 'hello_world'),
        ('hello world', 'hello_world'),
        ('hello-world', 'hello_world'),
        ('HTTPServer', 'http_server'),
    ])
    def test_to_snake_case(self, input_value: str, expected: str) -> None:
        """Test snake_case conversion."""
        assert Text.to_snake_case(input_value) == expected

    def test_to_snake_case_delimiter(self) -> None:
        """Test a custom snake case delimiter."""
        assert Text.to_snake_case('helloWorld', '.') == 'hello.world'

    @pytest.mark.parametrize("input_value,expected", [
        ('', ''),
        ('hello', 'hello'),
        ('hello_world', 'helloWorld'),
        ('HelloWorld', 'helloWorld'),
        ('hello world', 'helloWorld'),
        ('hello-world', 'helloWorld'),
    ])
    def test_to_camel_case(self, input_value: str, expected: str) -> None:
        """Test camelCase conversion."""
        assert Text.to_camel_case(input_value) == expected

    @pytest.mark.parametrize("input_value,expected", [
        ('', ''),
        ('hello', 'Hello'),
        ('helloWorld', 'HelloWorld'),
        ('hello_world', 'HelloWorld'),
        ('hello world', 'HelloWorld'),
        ('hello-world', 'HelloWorld'),
    ])
    def test_to_pascal_case(self, input_value: str, expected: str) -> None:
        """Test PascalCase conversion."""
        assert Text.to_pascal_case(input_value) == expected

    @pytest.mark.parametrize("input_value,expected", [
        ('', ''),
        ('hello world', 'hello-world'),
        ('hello world!@#', 'hello-world'),
        ('-hello-world-', 'hello-world'),
        ('Café Crème', 'cafe-creme'),
        ('你好 世界', ''),
    ])
    def test_slugify(self, input_value: str, expected: str) -> None:
        """Test slug generation."""
        assert Text.slugify(input_value) == expected

    def test_slugify_separator(self) -> None:
        """Test a custom slug separator."""
        assert Text.slugify('Hello World', '_') == 'hello_world'

    def test_truncate(self) -> None:
        """Test truncation including the ellipsis."""
        assert Text.truncate('hello world', 8) == 'hello...'
        assert Text.truncate('hello world', 20) == 'hello world'
        assert Text.truncate('hello world', 8, '---') == 'hello---'
        assert Text.truncate('hello world', 11) == 'hello world'

    def test_truncate_without_room_for_ellipsis(self) -> None:
        """Test that the result is never longer than the limit."""
        assert Text.truncate('hello world', 2) == 'he'
        assert Text.truncate('hello world', 0) == ''

    def test_truncate_default_length(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the configured length is the default."""
        monkeypatch.setattr(settings, 'TRUNCATE_LENGTH', 5)
        assert Text.truncate('hello world') == 'he...'

    def test_contains(self) -> None:
        """Test substring checks."""
        assert Text.contains('hello world', 'world') is True
        assert Text.contains('hello world', 'galaxy') is False
        assert Text.contains('hello world', ' ') is True
        assert Text.contains('hello world', ['galaxy', 'hello']) is True
        assert Text.contains('hello world', '') is False

    def test_random(self) -> None:
        """Test random hex strings."""
        assert isinstance(Text.random(), str)
        assert len(Text.random()) == 20
        assert len(Text.random(16)) == 32
        assert int(Text.random(4), 16) >= 0
        assert Text.random() != Text.random()

    @pytest.mark.parametrize("input_value,expected", [
        ('helloWorld', 'Hello World'),
        ('hello_world', 'Hello World'),
        ('HelloWorld', 'Hello World'),
        ('hello', 'Hello'),
        ('', ''),
    ])
    def test_to_readable_label(self, input_value: str, expected: str) -> None:
        """Test readable label conversion."""
        assert Text.to_readable_label(input_value) == expected

    def test_to_readable_label_first_word_only(self) -> None:
        """Test capitalizing only the first word."""
        assert Text.to_readable_label('user_first_name', all_words=False) == 'User first name'
