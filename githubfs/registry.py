import logging
import threading

from .errors import FileSystemAlreadyExistsError, FileSystemNotFoundError

logger = logging.getLogger(__name__)


class FileSystemRegistry:
    """
    Live filesystems by connection identity.

    Lookups and check-then-create sequences all run under one lock, so two
    threads can never both create a filesystem for the same identity.
    """

    def __init__(self):
        self._filesystems = {}
        self._lock = threading.RLock()

    def __contains__(self, identity):
        with self._lock:
            return identity in self._filesystems

    def __len__(self):
        with self._lock:
            return len(self._filesystems)

    def create(self, identity, factory):
        with self._lock:
            if identity in self._filesystems:
                raise FileSystemAlreadyExistsError(identity)
            filesystem = factory()
            self._filesystems[identity] = filesystem
            logger.info(f"new filesystem {identity}")
            return filesystem

    def get(self, identity):
        with self._lock:
            try:
                return self._filesystems[identity]
            except KeyError:
                raise FileSystemNotFoundError(identity) from None

    def get_or_create(self, identity, factory):
        with self._lock:
            if identity in self._filesystems:
                return self._filesystems[identity]
            return self.create(identity, factory)

    def remove(self, identity, filesystem=None):
        """Forget identity, only if it still maps to filesystem when one is given."""
        with self._lock:
            current = self._filesystems.get(identity)
            if current is None or (filesystem is not None and current is not filesystem):
                return False
            del self._filesystems[identity]
            return True

    def close(self):
        with self._lock:
            filesystems = list(self._filesystems.values())
        for filesystem in filesystems:
            filesystem.close()
        with self._lock:
            self._filesystems.clear()
