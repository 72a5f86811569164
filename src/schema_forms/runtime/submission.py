"""Submit action: collect once, then lock."""

import logging
from typing import List, Optional

from schema_forms.runtime.collector import ValueCollector
from schema_forms.runtime.registry import ComponentRegistry

logger = logging.getLogger(__name__)


class SubmitAction:
    """
    One-shot submission of a page.

    The first ``submit`` collects the registry and disables the action.
    Later calls do nothing and return the values of the first submission.
    """

    def __init__(self, registry: ComponentRegistry, collector: Optional[ValueCollector] = None):
        self._registry = registry
        self._collector = collector or ValueCollector()
        self._results: List[str] = []
        self._enabled = True

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def results(self) -> List[str]:
        return list(self._results)

    def submit(self) -> List[str]:
        if not self._enabled:
            logger.debug("Submit ignored, already submitted")
            return self.results

        self._results = self._collector.collect(self._registry)
        self._enabled = False
        logger.info(f"Submitted {len(self._results)} values: {self._results}")
        return self.results
