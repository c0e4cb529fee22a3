"""
Classifier Module
Assigns each Tailwind class to exactly one configured group.
"""

import logging
from collections import abc
from typing import Dict, List, Mapping, Sequence

from .class_grouping import ClassGrouping
from .class_token import ClassToken
from .errors import ConfigurationError
from .pattern_matcher import PatternMatcher

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_GROUP = 'Others'

# Group name -> patterns, in declaration order, e.g. {"Size": ["w-*", "h-*"]}
GroupMapping = Mapping[str, Sequence[str]]


class Classifier:
    """
    Classifies tokens with first-match-wins semantics.

    Groups are scanned in the mapping's declaration order and patterns in
    each group's declaration order. The first matching pattern decides the
    group. Tokens that match nothing go to the fallback group.
    """

    def __init__(self, group_order: Sequence[str], group_mapping: GroupMapping,
                 fallback_group: str = DEFAULT_FALLBACK_GROUP):
        self.validate(group_order, group_mapping, fallback_group)
        self.group_order = tuple(group_order)
        self.fallback_group = fallback_group
        self.matcher = PatternMatcher()
        ordered = set(self.group_order)
        # Fallback and unordered groups never take part in the scan
        self._scan = tuple(
            (name, tuple(patterns))
            for name, patterns in group_mapping.items()
            if name != fallback_group and name in ordered
        )

    @staticmethod
    def validate(group_order: Sequence[str], group_mapping: GroupMapping,
                 fallback_group: str = DEFAULT_FALLBACK_GROUP) -> None:
        """Raise ConfigurationError unless order and mapping describe a usable grouping."""
        if isinstance(group_order, str) or not isinstance(group_order, abc.Sequence):
            raise ConfigurationError('Group order must be a list of group names')
        if not isinstance(group_mapping, abc.Mapping):
            raise ConfigurationError('Group mapping must map group names to pattern lists')

        for name, patterns in group_mapping.items():
            if not isinstance(name, str) or not name.strip():
                raise ConfigurationError('Group mapping contains an empty group name')
            if isinstance(patterns, str) or not isinstance(patterns, abc.Sequence):
                raise ConfigurationError(f'Patterns for group "{name}" must be a list of strings')
            for pattern in patterns:
                if not isinstance(pattern, str):
                    raise ConfigurationError(f'Group "{name}" has a non-string pattern: {pattern!r}')

        seen = set()
        for name in group_order:
            if not isinstance(name, str) or not name.strip():
                raise ConfigurationError('Group order contains an empty group name')
            if name in seen:
                raise ConfigurationError(f'Group "{name}" appears more than once in order')
            if name not in group_mapping:
                raise ConfigurationError(f'Group "{name}" is in order but not in mapping')
            seen.add(name)

        if fallback_group not in seen:
            raise ConfigurationError(f'Fallback group "{fallback_group}" must be part of the group order')

    def find_group(self, token: ClassToken) -> str:
        for group_name, patterns in self._scan:
            pattern = self.matcher.matches_any(token, patterns)
            if pattern is not None:
                logger.debug(f"Class '{token.original}' matched '{pattern}' -> {group_name}")
                return group_name
        logger.debug(f"Class '{token.original}' matched no pattern -> {self.fallback_group}")
        return self.fallback_group

    def classify(self, tokens: Sequence[ClassToken]) -> ClassGrouping:
        """Group tokens, keeping input order inside each group."""
        assignments: Dict[str, List[ClassToken]] = {name: [] for name in self.group_order}
        for token in tokens:
            assignments[self.find_group(token)].append(token)
        return ClassGrouping.from_assignments(self.group_order, assignments)
