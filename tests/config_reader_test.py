import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.class_sorter import ASCENDING, CANONICAL, UNSORTED
from core.errors import ConfigurationError
from tailwind.config_reader import TailwindConfigReader, TransformOptions
from tailwind.defaults import DEFAULT_GROUP_MAPPING, DEFAULT_GROUP_ORDER


def test_defaults():
    options = TransformOptions()
    assert options.threshold == 0
    assert options.group_order == DEFAULT_GROUP_ORDER
    assert dict(options.mapping) == DEFAULT_GROUP_MAPPING
    assert options.utility_function == 'clsx'
    assert options.show_group_names is True
    assert options.comment_template == '// {groupName}'
    assert options.order == UNSORTED
    assert options.indent_width == 2
    assert options.fallback_group == 'Others'


def test_parse_options_none_gives_defaults():
    assert TailwindConfigReader().parse_options(None) == TransformOptions()


def test_parse_camel_case_options():
    options = TailwindConfigReader().parse_options({
        'threshold': 3,
        'order': 'asc',
        'commentTemplate': 'numbered',
        'utilityFunction': 'cn',
        'showGroupNames': False,
        'indentWidth': 4,
    })
    assert options.threshold == 3
    assert options.order == ASCENDING
    assert options.comment_template == '// {index}. {groupName}'
    assert options.utility_function == 'cn'
    assert options.show_group_names is False
    assert options.indent_width == 4


def test_parse_snake_case_options():
    options = TailwindConfigReader().parse_options({'comment_template': '# {groupName}', 'order': 'official'})
    assert options.comment_template == '# {groupName}'
    assert options.order == CANONICAL


def test_custom_mapping():
    options = TailwindConfigReader().parse_options({
        'groupOrder': ['Spacing', 'Misc'],
        'mapping': {'Spacing': ['p-*', 'm-*'], 'Misc': []},
        'fallbackGroup': 'Misc',
    })
    assert options.group_order == ('Spacing', 'Misc')
    assert options.mapping == {'Spacing': ('p-*', 'm-*'), 'Misc': ()}


@pytest.mark.parametrize('raw', [
    {'threshold': -1},
    {'threshold': True},
    {'threshold': '3'},
    {'threshold': -0.5},
    {'threshold': float('inf')},
    {'threshold': float('nan')},
    {'indentWidth': 2.0},
    {'indentWidth': -2},
    {'showGroupNames': 'yes'},
    {'utilityFunction': ''},
    {'utilityFunction': 'not a name'},
    {'commentTemplate': 5},
    {'order': 'random'},
    {'groupOrder': ['Size', 'Others'], 'mapping': {'Others': []}},
    {'groupOrder': ['Size']},
    {'include': ['**/*.tsx']},
    {'threshold': 1, 'THRESHOLD': 2},
    {'commentTemplate': 'line', 'comment_template': 'block'},
])
def test_invalid_options(raw):
    with pytest.raises(ConfigurationError):
        TailwindConfigReader().parse_options(raw)


def test_options_must_be_a_mapping():
    with pytest.raises(ConfigurationError):
        TailwindConfigReader().parse_options(['threshold', 2])


def test_read_config(tmp_path):
    config_file = tmp_path / 'grouping.json'
    config_file.write_text(json.dumps({'threshold': 4, 'order': 'desc'}), encoding='utf-8')
    options = TailwindConfigReader().read_config(config_file)
    assert options.threshold == 4
    assert options.order == 'descending'


def test_read_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        TailwindConfigReader().read_config(tmp_path / 'missing.json')


def test_read_config_invalid_json(tmp_path):
    config_file = tmp_path / 'broken.json'
    config_file.write_text('{"threshold": ', encoding='utf-8')
    with pytest.raises(ConfigurationError):
        TailwindConfigReader().read_config(str(config_file))


@pytest.mark.parametrize('threshold', [2.0, 0.0, 3.5])
def test_threshold_accepts_numbers(threshold):
    options = TailwindConfigReader().parse_options({'threshold': threshold})
    assert options.threshold == threshold


def test_float_threshold_from_json_file(tmp_path):
    config_file = tmp_path / 'grouping.json'
    config_file.write_text('{"threshold": 2.0}', encoding='utf-8')
    assert TailwindConfigReader().read_config(config_file).threshold == 2.0


def test_read_config_invalid_utf8(tmp_path):
    config_file = tmp_path / 'latin1.json'
    config_file.write_bytes(b'{"threshold": "\xff"}')
    with pytest.raises(ConfigurationError) as exc_info:
        TailwindConfigReader().read_config(config_file)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_read_config_directory(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        TailwindConfigReader().read_config(tmp_path)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_options_mapping_is_read_only():
    options = TransformOptions()
    with pytest.raises(TypeError):
        options.mapping['Size'] = ('x-*',)
    assert options.mapping['Size'][0] == 'w-*'


def test_options_are_hashable():
    assert hash(TransformOptions()) == hash(TransformOptions())
    assert TransformOptions() == TransformOptions()


def test_caller_mapping_changes_do_not_leak():
    mapping = {'Spacing': ['p-*'], 'Others': []}
    options = TransformOptions(group_order=('Spacing', 'Others'), mapping=mapping)
    mapping['Spacing'].append('m-*')
    mapping['Extra'] = []
    assert options.mapping == {'Spacing': ('p-*',), 'Others': ()}
