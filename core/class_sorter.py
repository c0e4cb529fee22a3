"""
Class Sorter Module
Orders the classes inside one group: as written, alphabetically, or in the
canonical Tailwind order supplied by an external oracle.
"""

import logging
from collections import Counter, defaultdict
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pyuca

from .class_token import ClassToken
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

UNSORTED = 'unsorted'
ASCENDING = 'ascending'
DESCENDING = 'descending'
CANONICAL = 'canonical'

SORT_ORDERS = (UNSORTED, ASCENDING, DESCENDING, CANONICAL)

ORDER_ALIASES: Dict[str, str] = {
    'no-sort': UNSORTED,
    'none': UNSORTED,
    'asc': ASCENDING,
    'desc': DESCENDING,
    'official': CANONICAL,
}

# Takes "a b c", returns the same classes space-joined in canonical order.
ClassOrderOracle = Callable[[str], str]


def normalize_order(order: str) -> str:
    """Resolve a strategy name or alias ("asc", "official", ...) to its canonical name."""
    if not isinstance(order, str):
        raise ConfigurationError(f"Sort order must be a string, got {type(order).__name__}")
    key = order.strip().lower()
    key = ORDER_ALIASES.get(key, key)
    if key not in SORT_ORDERS:
        valid = ', '.join(SORT_ORDERS + tuple(ORDER_ALIASES))
        raise ConfigurationError(f"Unknown sort order '{order}' (expected one of: {valid})")
    return key


@lru_cache(maxsize=None)
def _collator() -> pyuca.Collator:
    # Loading the DUCET table is slow; the collator is read-only afterwards
    return pyuca.Collator()


def collation_key(token: ClassToken) -> Tuple[int, ...]:
    """
    Primary-strength Unicode collation key, like localeCompare with base sensitivity.

    Case and accents are ignored, punctuation sorts before digits and digits
    before letters, so "mt-[3px]" comes before "mt-4".
    """
    key = _collator().sort_key(token.original)
    # primary weights end at the first level separator
    return key[:key.index(0)] if 0 in key else key


class ClassSorter:
    def __init__(self, oracle: Optional[ClassOrderOracle] = None):
        self.oracle = oracle

    def sort(self, classes: Sequence[ClassToken], order: str) -> List[ClassToken]:
        """Return a new list ordered by the given strategy. The input is never modified."""
        classes = list(classes)
        if not classes:
            return classes

        order = normalize_order(order)
        if order == UNSORTED:
            return classes
        if order in (ASCENDING, DESCENDING):
            # sorted() is stable for reverse=True as well, so ties keep input order
            return sorted(classes, key=collation_key, reverse=(order == DESCENDING))
        return self._sort_canonical(classes)

    def _sort_canonical(self, classes: List[ClassToken]) -> List[ClassToken]:
        if self.oracle is None:
            logger.warning("Canonical class order requested but no ordering oracle is configured")
            return classes

        class_string = ' '.join(token.original for token in classes)
        try:
            sorted_string = self.oracle(class_string)
            if not isinstance(sorted_string, str):
                raise TypeError(f"oracle returned {type(sorted_string).__name__}, expected str")
        except Exception as e:
            logger.warning(f"Failed to sort classes using canonical order: {e}", exc_info=True)
            return classes

        return self._restore_tokens(classes, sorted_string.split())

    def _restore_tokens(self, classes: List[ClassToken], sorted_names: List[str]) -> List[ClassToken]:
        """
        Map the oracle's class names back onto the original tokens.

        Each name consumes the next unused token with that exact text, so
        repeated classes are matched by occurrence. Names the input never
        contained are ignored. Tokens the oracle left out are appended in
        their input order.
        """
        pending = defaultdict(list)
        for token in reversed(classes):
            pending[token.original].append(token)

        result = []
        for name in sorted_names:
            if pending[name]:
                result.append(pending[name].pop())
            else:
                logger.debug(f"Ignoring class '{name}' returned by the ordering oracle")

        if len(result) < len(classes):
            consumed = Counter(token.original for token in result)
            seen = Counter()
            missing = []
            for token in classes:
                seen[token.original] += 1
                if seen[token.original] > consumed[token.original]:
                    missing.append(token)
            logger.warning(
                f"Ordering oracle returned {len(result)} of {len(classes)} classes; "
                f"keeping {len(missing)} unsorted at the end"
            )
            result.extend(missing)
        return result
