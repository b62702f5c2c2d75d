import errno


class GithubFsError(Exception):
    pass


class MalformedAddressError(GithubFsError, ValueError):
    pass


class FileSystemAlreadyExistsError(GithubFsError):
    pass


class FileSystemNotFoundError(GithubFsError):
    pass


class ClosedFileSystemError(GithubFsError):
    pass


class ProviderMismatchError(GithubFsError, TypeError):
    pass


class CredentialProfileError(GithubFsError):
    pass


class UnsupportedSyntaxError(GithubFsError, NotImplementedError):
    pass


# I/O shaped errors keep an errno so the fuse layer can pass it through


class ContentNotFoundError(FileNotFoundError):

    def __init__(self, path, reason="No such file or directory"):
        super().__init__(errno.ENOENT, reason, path)


class RemoteError(OSError):

    def __init__(self, path, cause):
        super().__init__(errno.EIO, f"remote request failed: {cause}", path)
        self.cause = cause


class ReadOnlyFileSystemError(OSError):

    def __init__(self, path=None):
        super().__init__(errno.EROFS, "Read-only file system", path)


def is_a_directory(path):
    return IsADirectoryError(errno.EISDIR, "Is a directory", path)


def is_a_file(path):
    return NotADirectoryError(errno.ENOTDIR, "Is a file", path)
