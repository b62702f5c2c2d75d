import logging

from .errors import ClosedFileSystemError, ReadOnlyFileSystemError
from .loader import ContentLoader, child_path
from .path import GithubPath
from .pathmatcher import get_path_matcher
from .streams import ByteChannel, ByteStream, DirectoryStream
from .util import is_write_mode

logger = logging.getLogger(__name__)


class GithubFileSystem:
    """
    Read-only view of one repository at one revision.

    Created by GithubFileSystemProvider, one instance per connection
    identity. Fetched contents are cached for the lifetime of the instance.
    """

    separator = "/"

    def __init__(self, provider, address, connection, fetcher, cache=None):
        self.provider = provider
        self.identity = address.identity
        self.repository = address.repository
        self.connection = connection
        self.loader = ContentLoader(address.repository, connection, fetcher, cache)
        self._open = True

    def __repr__(self):
        return f"GithubFileSystem({self.repository!r}, revision={self.connection.revision!r})"

    @property
    def revision(self):
        return self.connection.revision

    def is_open(self):
        return self._open

    def is_read_only(self):
        return True

    def close(self):
        if not self._open:
            return
        self._open = False
        self.loader.cache.close()
        if self.provider is not None:
            self.provider.registry.remove(self.identity, self)
        logger.info(f"closed filesystem {self.identity}")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _check_open(self):
        if not self._open:
            raise ClosedFileSystemError(f"filesystem {self.identity} is closed")

    @property
    def root_directories(self):
        return [GithubPath(self, "/")]

    def get_path(self, first, *more):
        if not more:
            return GithubPath(self, first)
        path = first
        for segment in more:
            if segment:
                if path:
                    path += "/"
                path += segment
        return GithubPath(self, path)

    def get_path_matcher(self, syntax_and_pattern):
        return get_path_matcher(syntax_and_pattern)

    def _key(self, path):
        if not isinstance(path, GithubPath):
            path = GithubPath(self, path)
        return str(path.to_absolute())

    def new_input_stream(self, path):
        self._check_open()
        key = self._key(path)
        return ByteStream(self.loader.fetch_file(key), key)

    def new_byte_channel(self, path, mode="r"):
        if is_write_mode(mode):
            raise ReadOnlyFileSystemError(str(path))
        self._check_open()
        key = self._key(path)
        return ByteChannel(self.loader.fetch_file(key), key)

    def new_directory_stream(self, directory, filter=None):
        self._check_open()
        key = self._key(directory)
        entries = self.loader.list_entries(key)
        return DirectoryStream(
            directory,
            entries,
            lambda entry: GithubPath(self, child_path(key, entry.name)),
            filter,
        )

    def read_attributes(self, path):
        self._check_open()
        return self.loader.stat_path(self._key(path))
