"""
Comment Renderer Module
Expands comment templates such as "// {index}. {groupName} ({count})".
"""

import re
from dataclasses import dataclass
from typing import Dict

PLACEHOLDER_RE = re.compile(r'\{(groupName|index|count)\}')

DEFAULT_COMMENT_TEMPLATE = '// {groupName}'

COMMENT_TEMPLATE_PRESETS: Dict[str, str] = {
    'line': '// {groupName}',
    'block': '/* {groupName} */',
    'jsdoc': '/** {groupName} */',
    'bracket': '// [{groupName}]',
    'numbered': '// {index}. {groupName}',
    'verbose': '// {groupName} ({count} classes)',
}


@dataclass(frozen=True)
class TemplateVariables:
    group_name: str
    index: int  # 1-based among non-empty groups
    count: int


def render_comment_template(template: str, variables: TemplateVariables) -> str:
    """
    Replace {groupName}, {index} and {count} in the template.

    Every occurrence of each placeholder is replaced in a single pass, so a
    group name containing "{index}" is emitted as written. Any other {...}
    sequence is left untouched.

    Example:
        render_comment_template("// {index}. {groupName} ({count})",
                                TemplateVariables("Size", 1, 2))
        -> "// 1. Size (2)"
    """
    if not template:
        return ''
    values = {
        'groupName': variables.group_name,
        'index': str(variables.index),
        'count': str(variables.count),
    }
    return PLACEHOLDER_RE.sub(lambda match: values[match.group(1)], template)


def resolve_comment_template(template_or_preset: str) -> str:
    """Map a preset name ("line", "block", ...) to its template; other strings are templates."""
    return COMMENT_TEMPLATE_PRESETS.get(template_or_preset, template_or_preset)
