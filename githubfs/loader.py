import logging
import posixpath
from collections import namedtuple
from urllib.parse import quote

from .contents import DIRECTORY, FILE, ContentCache, DirectoryNode, parse_content
from .errors import ContentNotFoundError, RemoteError, is_a_directory, is_a_file
from .util import pretty_json

logger = logging.getLogger(__name__)


class FileAttributes(namedtuple("FileAttributes", ["kind", "size", "type"])):
    __slots__ = ()

    @property
    def is_regular_file(self):
        return self.kind == FILE

    @property
    def is_directory(self):
        return self.kind == DIRECTORY

    @property
    def is_symbolic_link(self):
        return False

    @property
    def is_other(self):
        return False


def split_path(path):
    """Return (parent, name) of an absolute path, parent is None for the root."""
    if path == "/":
        return None, ""
    parent, name = posixpath.split(path.rstrip("/"))
    return parent or "/", name


def child_path(parent, name):
    if parent.endswith("/"):
        return parent + name
    return parent + "/" + name


class ContentLoader:
    """
    Fetches nodes of one repository revision from the contents api.

    Every path is fetched at most once per cache, except when two threads
    miss on the same path at the same time: both fetch, the cache keeps the
    first node added and both callers get that one.
    """

    def __init__(self, repository, connection, fetcher, cache=None):
        self.repository = repository
        self.connection = connection
        self.fetcher = fetcher
        self.cache = cache if cache is not None else ContentCache()

        self.headers = {"Accept-Encoding": "gzip"}
        authorization = connection.authorization
        if authorization:
            self.headers["Authorization"] = authorization

    def url_for(self, path):
        url = f"{self.connection.endpoint}/repos/{self.repository}/contents{quote(path, safe='/')}"
        if self.connection.revision is not None:
            url += "?rev=" + quote(self.connection.revision, safe="")
        return url

    def load_content(self, path):
        node = self.cache.get(path)
        if node is not None:
            return node

        url = self.url_for(path)
        logger.debug(f"fetch {path} from {url}")
        try:
            data = self.fetcher.get_json(url, self.headers)
        except OSError as e:
            if getattr(e, "status_code", None) == 404:
                raise ContentNotFoundError(path) from e
            raise RemoteError(path, e) from e

        node = parse_content(data)
        if node is None:
            logger.debug(f"unexpected body for {path}: {pretty_json(data)}")
            message = data.get("message") if isinstance(data, dict) else None
            raise ContentNotFoundError(path, message or "No such file or directory")

        return self.cache.add(path, node)

    def fetch_file(self, path):
        node = self.load_content(path)
        if isinstance(node, DirectoryNode):
            raise is_a_directory(path)
        return node.data()

    def list_entries(self, path):
        node = self.load_content(path)
        if not isinstance(node, DirectoryNode):
            raise is_a_file(path)
        return node.entries

    def list_directory(self, path):
        return [child_path(path, entry.name) for entry in self.list_entries(path)]

    def stat_path(self, path):
        node = self.cache.get(path)

        if node is None:
            # a listing of the parent already describes its children
            parent, name = split_path(path)
            parent_node = self.cache.get(parent) if parent is not None else None
            if isinstance(parent_node, DirectoryNode):
                for entry in parent_node.entries:
                    if entry.name == name:
                        logger.debug(f"stat {path} from listing of {parent}")
                        if entry.is_directory:
                            return FileAttributes(DIRECTORY, 0, entry.type)
                        return FileAttributes(FILE, entry.size, entry.type)

        if node is None:
            node = self.load_content(path)

        if isinstance(node, DirectoryNode):
            return FileAttributes(DIRECTORY, 0, "dir")
        return FileAttributes(FILE, node.size, node.type)
