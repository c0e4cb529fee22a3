"""
Pattern Matcher Module
Matches class tokens against group patterns such as "bg-*" or "flex".
"""

from typing import Iterable, Optional

from .class_token import ClassToken

WILDCARD_SUFFIX = '-*'


class PatternMatcher:
    """Matches tokens against exact patterns and trailing "-*" prefix wildcards.

    Only the final two characters "-*" are special. Any other "*", "?" or
    bracket in a pattern is compared literally.
    """

    def matches(self, token: ClassToken, pattern: str) -> bool:
        normalized = token.get_normalized_pattern()
        if pattern.endswith(WILDCARD_SUFFIX):
            prefix = pattern[:-len(WILDCARD_SUFFIX)]
            return normalized == prefix or normalized.startswith(prefix + '-')
        return token.base_class == pattern or normalized == pattern

    def matches_any(self, token: ClassToken, patterns: Iterable[str]) -> Optional[str]:
        """Return the first pattern the token matches, or None."""
        for pattern in patterns:
            if self.matches(token, pattern):
                return pattern
        return None
