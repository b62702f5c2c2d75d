import base64
import logging
import posixpath
import threading
from collections import namedtuple

import diskcache

logger = logging.getLogger(__name__)

DIRECTORY = "directory"
FILE = "file"


class FileNode(namedtuple("FileNode", ["type", "size", "content"])):
    """A blob as reported by the contents api, content still base64 encoded."""

    __slots__ = ()

    def data(self):
        # the api wraps base64 at 60 columns, b64decode skips the newlines
        return base64.b64decode(self.content or "")


class Entry(namedtuple("Entry", ["name", "path", "type", "size"])):
    __slots__ = ()

    @property
    def is_directory(self):
        return self.type == "dir"


class DirectoryNode(namedtuple("DirectoryNode", ["entries"])):
    __slots__ = ()


def entry_name(item):
    name = item.get("name")
    if name:
        return name
    return posixpath.basename(str(item.get("path") or "").rstrip("/"))


def parse_entry(item):
    return Entry(
        name=entry_name(item),
        path=item.get("path"),
        type=item.get("type"),
        size=int(item.get("size") or 0),
    )


def parse_content(data):
    """
    Turn a decoded json body into a FileNode or a DirectoryNode.

    Returns None for anything else, including github's error objects like
    {"message": "Not Found"}.
    """
    if isinstance(data, list):
        return DirectoryNode(tuple(parse_entry(item) for item in data if isinstance(item, dict)))
    if isinstance(data, dict) and "type" in data:
        return FileNode(
            type=data["type"],
            size=int(data.get("size") or 0),
            content=data.get("content") or "",
        )
    return None


class ContentCache:
    """
    In-memory mapping of absolute path to node.

    Nodes are never replaced: add() keeps whichever node got in first and
    returns it, so racing fetches of one path all end up with the same node.
    """

    def __init__(self):
        self._nodes = {}
        self._lock = threading.Lock()

    def get(self, path):
        return self._nodes.get(path)

    def add(self, path, node):
        with self._lock:
            return self._nodes.setdefault(path, node)

    def __contains__(self, path):
        return path in self._nodes

    def __len__(self):
        return len(self._nodes)

    def close(self):
        pass


class DiskContentCache:
    """
    Persistent node cache shared by all filesystems on the same revision
    fetched with the same credential.

    Only safe for pinned revisions, a branch name may move between runs.
    """

    def __init__(self, disk_cache_dir, size_limit, namespace):
        logger.info(f"disk cache at {disk_cache_dir} (size limit {size_limit})")
        self.disk_cache = diskcache.Cache(disk_cache_dir, size_limit=size_limit)
        self.namespace = tuple(namespace)

    def _key(self, path):
        return self.namespace + (path,)

    def get(self, path):
        return self.disk_cache.get(self._key(path))

    def add(self, path, node):
        key = self._key(path)
        if self.disk_cache.add(key, node):
            return node
        existing = self.disk_cache.get(key)
        if existing is None:
            # evicted between add and get
            return node
        return existing

    def __contains__(self, path):
        return self._key(path) in self.disk_cache

    def __len__(self):
        return sum(1 for key in self.disk_cache.iterkeys() if key[:-1] == self.namespace)

    def close(self):
        self.disk_cache.close()
