import logging

from font_booklet.core.storage import Storage

logger = logging.getLogger(__name__)

PERSISTENT_KEY_HEAD = "BookmarkedMember "


class BookmarkService:
    """
    Service to handle bookmarked font faces.
    Mutations only touch the in-memory set; call save() afterwards to
    reconcile the defaults store with it.
    """
    def __init__(self, storage: Storage, key_head: str = PERSISTENT_KEY_HEAD):
        self.storage = storage
        self.key_head = key_head
        self._members = set()

    @property
    def members(self) -> frozenset:
        return frozenset(self._members)

    def _key_for(self, face: str) -> str:
        return f"{self.key_head}{face}"

    def load(self) -> set:
        """
        Rebuild the in-memory set from the persisted keys under the key head.
        """
        persisted = self.storage.keys_with_prefix(self.key_head)
        self._members = {key[len(self.key_head):] for key in persisted}
        logger.info("Loaded %d bookmarked faces", len(self._members))
        return set(self._members)

    def is_bookmarked(self, face: str) -> bool:
        return face in self._members

    def toggle(self, face: str) -> bool:
        """
        Toggles the bookmark status for the given face.
        Returns the new status (True/False).
        """
        if face in self._members:
            self._members.remove(face)
            return False
        self._members.add(face)
        return True

    def bookmark(self, face: str):
        self._members.add(face)

    def remove_bookmark(self, face: str):
        self._members.discard(face)

    def save(self):
        """
        Reconcile the store: drop persisted entries that are no longer
        members, then (re)write an entry for every current member.
        """
        current_keys = {self._key_for(member) for member in self._members}
        stale_keys = [
            key for key in self.storage.keys_with_prefix(self.key_head)
            if key not in current_keys
        ]
        self.storage.remove_keys(stale_keys)
        self.storage.add_keys(sorted(current_keys))
        logger.debug("Bookmarks saved: %d removed, %d written",
                     len(stale_keys), len(current_keys))
