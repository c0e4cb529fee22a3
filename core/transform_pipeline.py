"""
Transform Pipeline Module
Turns a raw className string into a grouped utility call expression.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from tailwind.config_reader import TransformOptions

from .class_grouping import ClassGrouping
from .class_sorter import CANONICAL, UNSORTED, ClassOrderOracle, ClassSorter
from .class_token import ClassToken
from .classifier import Classifier

logger = logging.getLogger(__name__)


@dataclass
class TransformResult:
    should_transform: bool
    original: str
    transformed: Optional[str] = None
    grouping: Optional[ClassGrouping] = None


def split_class_names(class_string: str) -> List[str]:
    """Split on whitespace runs, dropping empty entries."""
    return [name.strip() for name in class_string.split() if name.strip()]


def deduplicate(class_names: List[str]) -> List[str]:
    """Drop repeated classes, keeping the first occurrence of each."""
    return list(dict.fromkeys(class_names))


class TransformPipeline:
    def __init__(self, options: Optional[TransformOptions] = None,
                 oracle: Optional[ClassOrderOracle] = None):
        self.options = options or TransformOptions()
        # Validates order and mapping before any transform runs
        self.classifier = Classifier(self.options.group_order, self.options.mapping,
                                     self.options.fallback_group)
        if oracle is None and self.options.order == CANONICAL:
            from tailwind.official_order import NodeClassOrderOracle
            oracle = NodeClassOrderOracle()
        self.sorter = ClassSorter(oracle)

    def _sort_group(self, classes: List[ClassToken]) -> List[ClassToken]:
        return self.sorter.sort(classes, self.options.order)

    def transform(self, class_string: str, threshold: Optional[float] = None) -> TransformResult:
        """
        Classify and render one className string.

        Args:
            class_string: Whitespace separated classes as found in the source.
            threshold: Minimum number of unique classes required to transform.
                Defaults to the configured threshold.

        Returns:
            TransformResult. The grouping is returned even when the threshold
            is not met; it is None only for input without any class.
        """
        if threshold is None:
            threshold = self.options.threshold

        class_names = split_class_names(class_string)
        if not class_names:
            return TransformResult(should_transform=False, original=class_string)

        unique_names = deduplicate(class_names)
        if len(unique_names) < len(class_names):
            logger.debug(f"Dropped {len(class_names) - len(unique_names)} duplicate class(es)")

        tokens = [ClassToken.parse(name) for name in unique_names]
        grouping = self.classifier.classify(tokens)

        if not grouping.meets_threshold(threshold):
            logger.debug(f"{grouping.total_count()} class(es) below threshold {threshold}, not transforming")
            return TransformResult(should_transform=False, original=class_string, grouping=grouping)

        sorter = self._sort_group if self.options.order != UNSORTED else None
        transformed = grouping.render(
            indent_width=self.options.indent_width,
            show_group_names=self.options.show_group_names,
            comment_template=self.options.comment_template,
            sorter=sorter,
            utility_function=self.options.utility_function,
        )
        return TransformResult(
            should_transform=True,
            original=class_string,
            transformed=transformed,
            grouping=grouping,
        )


def transform_class_string(class_string: str, options: Optional[TransformOptions] = None) -> TransformResult:
    """One-off transform with the given (or default) options."""
    return TransformPipeline(options).transform(class_string)
