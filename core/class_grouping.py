"""
Class Grouping Module
Holds classified Tailwind classes in their configured groups and renders them
as a grouped utility call, e.g.

    clsx(
      // Size
      "h-9 w-full",
      // Spacing
      "px-3 py-2"
    )
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .class_token import ClassToken
from .comment_renderer import DEFAULT_COMMENT_TEMPLATE, TemplateVariables, render_comment_template
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_UTILITY_FUNCTION = 'clsx'
EMPTY_EXPRESSION = '""'

GroupSorter = Callable[[List[ClassToken]], List[ClassToken]]


def _escape_literal(value: str) -> str:
    return value.replace('\\', '\\\\').replace('"', '\\"')


@dataclass(frozen=True)
class ClassGroup:
    name: str
    classes: Tuple[ClassToken, ...] = ()

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError('Class group name cannot be empty')

    @classmethod
    def empty(cls, name: str) -> 'ClassGroup':
        return cls(name, ())

    def add_class(self, token: ClassToken) -> 'ClassGroup':
        return ClassGroup(self.name, self.classes + (token,))

    def add_classes(self, tokens: Iterable[ClassToken]) -> 'ClassGroup':
        return ClassGroup(self.name, self.classes + tuple(tokens))

    def is_empty(self) -> bool:
        return not self.classes

    @property
    def size(self) -> int:
        return len(self.classes)

    def to_class_string(self, sorted_classes: Optional[Sequence[ClassToken]] = None) -> str:
        """Space-join the classes, or a pre-sorted copy of them when given."""
        classes = self.classes if sorted_classes is None else sorted_classes
        return ' '.join(token.original for token in classes)


@dataclass(frozen=True)
class ClassGrouping:
    """
    Aggregate of every configured group, in configured order, empty ones included.

    The set of groups is fixed at construction. Adding a class returns a new
    grouping that shares all untouched ClassGroup instances with this one.
    """
    groups: Tuple[ClassGroup, ...]
    _index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index = {}
        for position, group in enumerate(self.groups):
            if group.name in index:
                raise ConfigurationError(f"Group '{group.name}' is declared more than once")
            index[group.name] = position
        object.__setattr__(self, '_index', index)

    @classmethod
    def create_empty(cls, group_names: Sequence[str]) -> 'ClassGrouping':
        return cls(tuple(ClassGroup.empty(name) for name in group_names))

    @classmethod
    def from_assignments(cls, group_names: Sequence[str],
                         assignments: Mapping[str, Sequence[ClassToken]]) -> 'ClassGrouping':
        """Build a grouping in one step from a group name -> tokens mapping."""
        unknown = [name for name in assignments if name not in group_names]
        if unknown:
            raise KeyError(f"Unknown group(s): {', '.join(unknown)}")
        return cls(tuple(ClassGroup(name, tuple(assignments.get(name, ()))) for name in group_names))

    def add_class_to_group(self, group_name: str, token: ClassToken) -> 'ClassGrouping':
        if group_name not in self._index:
            raise KeyError(f"Unknown group '{group_name}'")
        position = self._index[group_name]
        groups = list(self.groups)
        groups[position] = groups[position].add_class(token)
        return ClassGrouping(tuple(groups))

    @property
    def group_names(self) -> List[str]:
        return [group.name for group in self.groups]

    def get_group(self, group_name: str) -> ClassGroup:
        return self.groups[self._index[group_name]]

    def non_empty_groups(self) -> List[ClassGroup]:
        return [group for group in self.groups if not group.is_empty()]

    def total_count(self) -> int:
        return sum(group.size for group in self.groups)

    def meets_threshold(self, threshold: int) -> bool:
        return self.total_count() >= threshold

    def all_classes(self) -> List[ClassToken]:
        """All classes flattened in group order."""
        return [token for group in self.groups for token in group.classes]

    def to_flat_string(self) -> str:
        return ' '.join(token.original for token in self.all_classes())

    def render(self,
               indent_width: int = 2,
               show_group_names: bool = True,
               comment_template: str = DEFAULT_COMMENT_TEMPLATE,
               sorter: Optional[GroupSorter] = None,
               utility_function: str = DEFAULT_UTILITY_FUNCTION) -> str:
        """
        Render the non-empty groups as a multi-line utility call.

        Args:
            indent_width: Spaces before each argument line. The closing
                parenthesis sits two spaces to the left of it.
            show_group_names: Emit a rendered comment line above each group.
            comment_template: Template for the comment line, see comment_renderer.
            sorter: Optional function reordering one group's classes. It is
                applied to each group separately.
            utility_function: Name of the wrapping call, e.g. "clsx" or "cn".

        Returns:
            The call expression, or '""' when every group is empty.
        """
        non_empty = self.non_empty_groups()
        if not non_empty:
            return EMPTY_EXPRESSION

        indent = ' ' * indent_width
        lines = []
        for index, group in enumerate(non_empty, start=1):
            classes = sorter(list(group.classes)) if sorter else None
            if show_group_names:
                comment = render_comment_template(
                    comment_template, TemplateVariables(group.name, index, group.size))
                lines.append(f"{indent}{comment}" if comment else '')
            separator = ',' if index < len(non_empty) else ''
            lines.append(f'{indent}"{_escape_literal(group.to_class_string(classes))}"{separator}')

        logger.debug(f"Rendered {len(non_empty)} group(s) with {self.total_count()} class(es)")
        closing_indent = ' ' * max(indent_width - 2, 0)
        return f"{utility_function}(\n" + '\n'.join(lines) + f"\n{closing_indent})"
