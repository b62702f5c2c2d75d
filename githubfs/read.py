import os
from errno import EROFS

from fuse import FuseOSError

from .fuse_errors import fuse_errors

WRITE_FLAGS = os.O_WRONLY | os.O_RDWR | os.O_APPEND | os.O_CREAT | os.O_TRUNC


def _data(self, path):
    try:
        return self.lru_cache[path]
    except KeyError:
        pass
    with fuse_errors():
        data = self.loader.fetch_file(path)
    self.lru_cache[path] = data
    return data


def open(self, path, flags):
    if flags & WRITE_FLAGS:
        raise FuseOSError(EROFS)
    # fail early on missing files and directories
    _data(self, path)
    return 0


def read(self, path, size, offset, fh):
    data = _data(self, path)
    return data[offset:offset + size]


def release(self, path, fh):
    return 0
