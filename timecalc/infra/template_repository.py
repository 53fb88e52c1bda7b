"""
Repository for the user's result template.

The template lives in a single slot of a KeyValueStore. Saving is
best-effort: a failing store is logged and otherwise ignored, so editing
the template never breaks the calculator.
"""

import logging
from typing import Optional

from timecalc.errors import StoreError
from timecalc.infra.store import InMemoryKeyValueStore, KeyValueStore
from timecalc.domain.models import DEFAULT_TEMPLATE, LEGACY_DEFAULT_TEMPLATE

logger = logging.getLogger(__name__)

TEMPLATE_STORAGE_KEY = "timecalc.result_template"


class TemplateRepository:
    """
    Handles persistence of the result template.
    """

    def __init__(self, store: Optional[KeyValueStore] = None):
        self.store = store if store is not None else InMemoryKeyValueStore()

    def load(self) -> str:
        """
        Load the stored template.

        Returns the default template when nothing is stored or the store
        cannot be read. A stored copy of the legacy default is upgraded to
        the current default and written back.
        """
        try:
            stored = self.store.get(TEMPLATE_STORAGE_KEY)
        except StoreError as e:
            logger.warning(f"Error loading template, using default: {e}")
            return DEFAULT_TEMPLATE

        if stored is None:
            return DEFAULT_TEMPLATE

        if stored == LEGACY_DEFAULT_TEMPLATE:
            logger.info("Replacing legacy default template with current default")
            self.save(DEFAULT_TEMPLATE)
            return DEFAULT_TEMPLATE

        return stored

    def save(self, template: str) -> bool:
        """
        Save the template.

        Returns:
            True if the store accepted the write, False otherwise
        """
        try:
            self.store.set(TEMPLATE_STORAGE_KEY, template)
            return True
        except StoreError as e:
            logger.warning(f"Error saving template: {e}")
            return False

    def reset(self) -> str:
        """Restore and persist the default template."""
        self.save(DEFAULT_TEMPLATE)
        logger.info("Template reset to default")
        return DEFAULT_TEMPLATE
