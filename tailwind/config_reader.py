"""
Tailwind Config Reader Module
Reads grouping options from dicts or JSON files and validates them up front.
"""

import json
import logging
import math
import re
from collections import abc
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from core.class_grouping import DEFAULT_UTILITY_FUNCTION
from core.class_sorter import UNSORTED, normalize_order
from core.classifier import DEFAULT_FALLBACK_GROUP, Classifier
from core.comment_renderer import DEFAULT_COMMENT_TEMPLATE, resolve_comment_template
from core.errors import ConfigurationError

from .defaults import DEFAULT_GROUP_MAPPING, DEFAULT_GROUP_ORDER, DEFAULT_INDENT_WIDTH, DEFAULT_THRESHOLD

logger = logging.getLogger(__name__)

# e.g. "clsx", "cn", "classNames", "tw.merge"
UTILITY_FUNCTION_RE = re.compile(r'^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$')

# Option names as written in config files -> TransformOptions fields
OPTION_KEYS: Dict[str, str] = {
    'threshold': 'threshold',
    'groupOrder': 'group_order',
    'mapping': 'mapping',
    'utilityFunction': 'utility_function',
    'showGroupNames': 'show_group_names',
    'commentTemplate': 'comment_template',
    'order': 'order',
    'indentWidth': 'indent_width',
    'fallbackGroup': 'fallback_group',
}


def _default_mapping() -> Dict[str, Tuple[str, ...]]:
    return dict(DEFAULT_GROUP_MAPPING)


def _check_non_negative(name: str, value: Any, numeric_types=(int,), kind: str = 'an integer') -> None:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, numeric_types):
        raise ConfigurationError(f"'{name}' must be {kind}, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigurationError(f"'{name}' must be finite, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"'{name}' must be >= 0, got {value}")


@dataclass(frozen=True)
class TransformOptions:
    threshold: Union[int, float] = DEFAULT_THRESHOLD
    group_order: Tuple[str, ...] = DEFAULT_GROUP_ORDER
    mapping: Mapping[str, Tuple[str, ...]] = field(default_factory=_default_mapping, hash=False)
    utility_function: str = DEFAULT_UTILITY_FUNCTION
    show_group_names: bool = True
    comment_template: str = DEFAULT_COMMENT_TEMPLATE
    order: str = UNSORTED
    indent_width: int = DEFAULT_INDENT_WIDTH
    fallback_group: str = DEFAULT_FALLBACK_GROUP

    def __post_init__(self):
        _check_non_negative('threshold', self.threshold, (int, float), 'a number')
        _check_non_negative('indentWidth', self.indent_width)
        if not isinstance(self.show_group_names, bool):
            raise ConfigurationError(f"'showGroupNames' must be a boolean, got {self.show_group_names!r}")
        if not isinstance(self.utility_function, str) or not UTILITY_FUNCTION_RE.match(self.utility_function):
            raise ConfigurationError(f"'utilityFunction' is not a valid function name: {self.utility_function!r}")
        if not isinstance(self.comment_template, str):
            raise ConfigurationError(f"'commentTemplate' must be a string, got {self.comment_template!r}")

        Classifier.validate(self.group_order, self.mapping, self.fallback_group)

        object.__setattr__(self, 'group_order', tuple(self.group_order))
        object.__setattr__(self, 'mapping', MappingProxyType(
            {name: tuple(patterns) for name, patterns in self.mapping.items()}))
        object.__setattr__(self, 'order', normalize_order(self.order))
        object.__setattr__(self, 'comment_template', resolve_comment_template(self.comment_template))


class TailwindConfigReader:
    """Builds TransformOptions from option dictionaries or JSON config files."""

    def parse_options(self, raw: Union[Mapping[str, Any], None]) -> TransformOptions:
        """Merge the given options over the defaults. Keys may be camelCase or snake_case."""
        if raw is None:
            return TransformOptions()
        if not isinstance(raw, abc.Mapping):
            raise ConfigurationError(f"Options must be an object, got {type(raw).__name__}")

        fields = set(OPTION_KEYS.values())
        kwargs = {}
        for key, value in raw.items():
            name = OPTION_KEYS.get(key, key)
            if name not in fields:
                raise ConfigurationError(f"Unknown option '{key}'")
            if name in kwargs:
                raise ConfigurationError(f"Option '{key}' is given more than once")
            kwargs[name] = value
        logger.debug(f"Parsed options: {sorted(kwargs)}")
        return TransformOptions(**kwargs)

    def read_config(self, config_path: Union[str, Path]) -> TransformOptions:
        """Read a JSON file holding one options object."""
        path = Path(config_path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Config file not found: {path}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Config file {path} is not valid UTF-8: {e}") from e
        logger.info(f"Loaded grouping options from {path}")
        return self.parse_options(raw)
