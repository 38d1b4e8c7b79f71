"""
Ferris Discord Bot - Keyword Matcher
====================================

Decides whether a message counts as a mention of the tracked keyword.

Author: حَـــــنَّـــــا
"""

import re
from typing import Optional


class KeywordMatcher:
    """
    Whole-word, case-insensitive keyword matcher.

    DESIGN:
        The text is lower-cased and searched for the keyword with no word
        character directly before or after it, so "I love Rust!" matches
        while "trusted" and "rusty" do not. Keywords with symbol edges
        ("c++", ".net") match the same way.
    """

    def __init__(self, keyword: str) -> None:
        keyword = keyword.strip().lower()
        if not keyword:
            raise ValueError("Keyword must not be empty")
        self.keyword = keyword
        self._pattern = re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)")

    def matches(self, text: Optional[str]) -> bool:
        """Return True if text mentions the keyword as a separate word."""
        if not isinstance(text, str) or not text:
            return False
        return self._pattern.search(text.lower()) is not None

    def __repr__(self) -> str:
        return f"KeywordMatcher({self.keyword!r})"


__all__ = ["KeywordMatcher"]
