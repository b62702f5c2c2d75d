import hashlib
import logging
import os

import requests

from httpfs.fetchers import HttpFetcher

from .address import SCHEME, parse_address, split_identity
from .config import PROFILE_PATH
from .contents import ContentCache, DiskContentCache
from .credentials import resolve_connection
from .errors import (
    FileSystemNotFoundError,
    ProviderMismatchError,
    ReadOnlyFileSystemError,
)
from .filesystem import GithubFileSystem
from .path import GithubPath
from .wrap_requests import wrap_requests

logger = logging.getLogger(__name__)

DISK_CACHE_SIZE = 2 ** 30


class GithubFileSystemProvider:
    """
    Entry point for github: addresses.

    The registry is passed in by whoever owns the provider, filesystems are
    looked up and created through it.
    """

    scheme = SCHEME

    def __init__(
        self,
        registry,
        fetcher=None,
        profile_path=PROFILE_PATH,
        disk_cache_dir=None,
        disk_cache_size=DISK_CACHE_SIZE,
    ):
        self.registry = registry
        if fetcher is None:
            fetcher = HttpFetcher(wrap_requests(requests.Session()))
        self.fetcher = fetcher
        self.profile_path = profile_path
        self.disk_cache_dir = disk_cache_dir
        self.disk_cache_size = disk_cache_size

    def _make_cache(self, connection, repository):
        if not self.disk_cache_dir:
            return ContentCache()
        if connection.revision is None:
            logger.info(f"not using disk cache for {repository}: no pinned revision")
            return ContentCache()
        return DiskContentCache(
            self.disk_cache_dir,
            self.disk_cache_size,
            (connection.endpoint, repository, connection.revision, credential_key(connection)),
        )

    def _create(self, address, env):
        connection = resolve_connection(address, env, self.profile_path)
        logger.debug(f"connection for {address.repository}: {connection}")
        cache = self._make_cache(connection, address.repository)
        return GithubFileSystem(self, address, connection, self.fetcher, cache)

    def new_filesystem(self, address, env=None):
        parsed = parse_address(address)
        return self.registry.create(parsed.identity, lambda: self._create(parsed, env))

    def get_filesystem(self, address, create=False, env=None):
        identity, _ = split_identity(address)
        try:
            return self.registry.get(identity)
        except FileSystemNotFoundError:
            if not create:
                raise
        parsed = parse_address(address)
        return self.registry.get_or_create(parsed.identity, lambda: self._create(parsed, env))

    def get_path(self, address):
        parsed = parse_address(address)
        path = parsed.require_path()
        return self.get_filesystem(address, create=True).get_path(path)

    def _check(self, path):
        if not isinstance(path, GithubPath):
            raise ProviderMismatchError(f"{path!r} is not a github path")
        return path

    # read

    def new_input_stream(self, path):
        return self._check(path).filesystem.new_input_stream(path)

    def new_directory_stream(self, directory, filter=None):
        return self._check(directory).filesystem.new_directory_stream(directory, filter)

    def new_byte_channel(self, path, mode="r"):
        return self._check(path).filesystem.new_byte_channel(path, mode)

    def read_attributes(self, path):
        return self._check(path).filesystem.read_attributes(path)

    def is_same_file(self, path, other):
        return self._check(path).to_absolute() == self._check(other).to_absolute()

    def is_hidden(self, path):
        return False

    def check_access(self, path, *modes):
        if any(is_write_access(mode) for mode in modes):
            raise ReadOnlyFileSystemError(str(path))

    # read only

    def create_directory(self, directory, *attrs):
        raise ReadOnlyFileSystemError(str(directory))

    def delete(self, path):
        raise ReadOnlyFileSystemError(str(path))

    def copy(self, source, target, *options):
        raise ReadOnlyFileSystemError(str(target))

    def move(self, source, target, *options):
        raise ReadOnlyFileSystemError(str(source))

    def set_attribute(self, path, attribute, value):
        raise ReadOnlyFileSystemError(str(path))


def is_write_access(mode):
    if isinstance(mode, int):
        return bool(mode & os.W_OK)
    return mode in ("w", "write")


def credential_key(connection):
    """Separates cached nodes by who fetched them, without storing the secret."""
    authorization = connection.authorization
    if authorization is None:
        return "anonymous"
    return hashlib.sha256(authorization.encode("utf-8")).hexdigest()
