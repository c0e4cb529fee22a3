"""
Class Token Module
Parses a single Tailwind class into its base class and variant modifiers.
"""

import re
from dataclasses import dataclass, field
from typing import Tuple

VARIANT_DELIMITER = ':'

# e.g. "w-[500px]", "transition-[color,box-shadow]"
ARBITRARY_VALUE_RE = re.compile(r'^([a-z-]+?)-\[.+\]$')


@dataclass(frozen=True)
class ClassToken:
    original: str
    base_class: str = field(compare=False)
    modifiers: Tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def parse(cls, raw: str) -> 'ClassToken':
        """Split a raw class on ':' into modifiers (outer to inner) and the base class."""
        parts = raw.split(VARIANT_DELIMITER)
        if len(parts) == 1:
            return cls(raw, raw, ())
        return cls(raw, parts[-1], tuple(parts[:-1]))

    def get_normalized_pattern(self) -> str:
        """Return the base class with an arbitrary value collapsed to a wildcard ("w-[500px]" -> "w-*")."""
        match = ARBITRARY_VALUE_RE.match(self.base_class)
        if match:
            return f"{match.group(1)}-*"
        return self.base_class

    @property
    def has_modifiers(self) -> bool:
        return bool(self.modifiers)

    @property
    def is_arbitrary(self) -> bool:
        return ARBITRARY_VALUE_RE.match(self.base_class) is not None

    def __str__(self) -> str:
        return self.original
