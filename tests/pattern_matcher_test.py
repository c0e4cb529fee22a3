import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.class_token import ClassToken
from core.pattern_matcher import PatternMatcher


@pytest.mark.parametrize('raw, pattern', [
    ('w-full', 'w-*'),
    ('border', 'border-*'),
    ('border-t-2', 'border-*'),
    ('hover:bg-blue-500', 'bg-*'),
    ('x-[anything]', 'x-*'),
    ('w-[500px]', 'w-*'),
    ('flex', 'flex'),
    ('md:flex', 'flex'),
])
def test_matches(raw, pattern):
    assert PatternMatcher().matches(ClassToken.parse(raw), pattern)


@pytest.mark.parametrize('raw, pattern', [
    ('x-[anything]', 'y-*'),
    ('hidden', 'h-*'),
    ('px-3', 'p-*'),
    ('flex-1', 'flex'),
    ('text-white', 'to-*'),
    ('min-w-0', 'w-*'),
])
def test_does_not_match(raw, pattern):
    assert not PatternMatcher().matches(ClassToken.parse(raw), pattern)


def test_only_trailing_wildcard_is_special():
    matcher = PatternMatcher()
    assert not matcher.matches(ClassToken.parse('bg-red-500'), 'bg-*-500')
    assert matcher.matches(ClassToken.parse('bg-*-500'), 'bg-*-500')
    assert not matcher.matches(ClassToken.parse('border'), '*')



def test_matches_any_returns_first_pattern():
    matcher = PatternMatcher()
    token = ClassToken.parse('rounded-md')
    assert matcher.matches_any(token, ['border', 'rounded-*', 'rounded-md']) == 'rounded-*'
    assert matcher.matches_any(token, ['shadow-*']) is None
    assert matcher.matches_any(token, []) is None
