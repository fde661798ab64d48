import logging

from .storage import Storage
from . import pangrams

logger = logging.getLogger(__name__)

SAMPLE_TEXT_KEY = "SampleText"


class SampleText:
    """
    The free-text string previewed in every face, persisted in the defaults store.
    """
    def __init__(self, storage: Storage, pool=pangrams.MYSTERY_BAG):
        self.storage = storage
        self.pool = pool

    @property
    def text(self) -> str:
        return self.storage.get_value(SAMPLE_TEXT_KEY, pangrams.STANDARD)

    def replace(self, value: str):
        """Store any value, including an empty one (live editing)."""
        self.storage.set_value(SAMPLE_TEXT_KEY, value)

    def commit(self, value: str = None) -> str:
        """
        Finish an edit. Empty text falls back to the standard pangram.
        Returns the committed value.
        """
        if value is None:
            value = self.text
        if not value:
            value = pangrams.STANDARD
        self.storage.set_value(SAMPLE_TEXT_KEY, value)
        logger.info("Sample text committed: %r", value)
        return value

    def shuffle(self, rng=None) -> str:
        """Replace the text with a random pangram different from the current one."""
        new_sample = pangrams.random_pangram(self.text, pool=self.pool, rng=rng)
        self.replace(new_sample)
        return new_sample
