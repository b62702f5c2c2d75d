"""
Read-only access to a github repository at one revision.

Addresses look like

    github:[login[:password]@]owner/repository[?revision=...][!/path]

and are resolved through the contents api. Everything fetched is kept for
the lifetime of the filesystem, a pinned revision does not change.
"""

from .address import parse_address
from .errors import (
    ClosedFileSystemError,
    ContentNotFoundError,
    CredentialProfileError,
    FileSystemAlreadyExistsError,
    FileSystemNotFoundError,
    GithubFsError,
    MalformedAddressError,
    ProviderMismatchError,
    ReadOnlyFileSystemError,
    RemoteError,
    UnsupportedSyntaxError,
)
from .filesystem import GithubFileSystem
from .path import GithubPath
from .pathmatcher import get_path_matcher, glob_to_regex
from .provider import GithubFileSystemProvider
from .registry import FileSystemRegistry

__all__ = [
    "ClosedFileSystemError",
    "ContentNotFoundError",
    "CredentialProfileError",
    "FileSystemAlreadyExistsError",
    "FileSystemNotFoundError",
    "FileSystemRegistry",
    "GithubFileSystem",
    "GithubFileSystemProvider",
    "GithubFsError",
    "GithubPath",
    "MalformedAddressError",
    "ProviderMismatchError",
    "ReadOnlyFileSystemError",
    "RemoteError",
    "UnsupportedSyntaxError",
    "get_path_matcher",
    "glob_to_regex",
    "parse_address",
]
