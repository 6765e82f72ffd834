from __future__ import annotations

import re
import secrets
import unicodedata
from typing import List, Optional, Union

from support.Config import settings


class Text:
    """Laravel-style string case and formatting helpers."""

    @staticmethod
    def words(value: str) -> List[str]:
        """Split a string into words at separators and case changes."""
        # helloWorld -> hello World, HTTPServer -> HTTP Server
        value = re.sub(r'([a-z0-9])([A-Z])', r'\1 \2', value)
        value = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1 \2', value)
        return [word for word in re.split(r'[\W_]+', value) if word]

    @staticmethod
    def ascii(value: str) -> str:
        """Transliterate a UTF-8 value to ASCII."""
        return unicodedata.normalize('NFKD', value).encode('ascii', 'ignore').decode('ascii')

    @staticmethod
    def to_title_case(text: str) -> str:
        """Convert to Title Case."""
        return re.sub(r"(?<![\w'’])\w", lambda match: match.group(0).upper(), text.lower())

    @staticmethod
    def to_kebab_case(text: str) -> str:
        """Convert to kebab case (hello-world)."""
        return '-'.join(word.lower() for word in Text.words(text))

    @staticmethod
    def to_snake_case(text: str, delimiter: str = '_') -> str:
        """Convert to snake case (hello_world)."""
        return delimiter.join(word.lower() for word in Text.words(text))

    @staticmethod
    def to_camel_case(text: str) -> str:
        """Convert to camel case (helloWorld)."""
        words = Text.words(text)
        if not words:
            return ""

        # First word lowercase, rest capitalized
        return words[0].lower() + ''.join(Text._capitalize(word) for word in words[1:])

    @staticmethod
    def to_pascal_case(text: str) -> str:
        """Convert to Pascal case (HelloWorld)."""
        return ''.join(Text._capitalize(word) for word in Text.words(text))

    @staticmethod
    def slugify(text: str, separator: str = '-') -> str:
        """Generate a URL friendly slug from a given string."""
        # Convert to ASCII
        text = Text.ascii(text)

        # Convert to lowercase
        text = text.lower()

        # Replace non-alphanumeric characters with separator
        text = re.sub(r'[^a-z0-9]+', separator, text)

        # Remove leading/trailing separators
        return text.strip(separator)

    @staticmethod
    def truncate(text: str, length: Optional[int] = None, ellipsis: str = '...') -> str:
        """Truncate text so that, ellipsis included, it fits in ``length`` characters."""
        if length is None:
            length = settings.TRUNCATE_LENGTH

        if len(text) <= length:
            return text

        cut = length - len(ellipsis)
        if cut <= 0:
            # No room for the ellipsis
            return text[:max(length, 0)]

        return text[:cut] + ellipsis

    @staticmethod
    def contains(haystack: str, needles: Union[str, List[str]]) -> bool:
        """Determine if a given string contains any of the given substrings."""
        if isinstance(needles, str):
            needles = [needles]

        return any(needle and needle in haystack for needle in needles)

    @staticmethod
    def random(length: Optional[int] = None) -> str:
        """Generate a hex string from ``length`` cryptographically random bytes."""
        if length is None:
            length = settings.RANDOM_LENGTH
        return secrets.token_hex(length)

    @staticmethod
    def to_readable_label(text: str, all_words: bool = True) -> str:
        """Turn an identifier such as helloWorld or hello_world into a label."""
        words = Text.words(text)
        if not words:
            return ""

        if all_words:
            return ' '.join(Text._capitalize(word) for word in words)

        return ' '.join([Text._capitalize(words[0])] + [word.lower() for word in words[1:]])

    @staticmethod
    def _capitalize(word: str) -> str:
        return word[:1].upper() + word[1:].lower()
