from errno import EROFS

from fuse import FuseOSError


def _read_only(*args, **kwargs):
    raise FuseOSError(EROFS)


chmod = chown = create = link = mkdir = mknod = _read_only
rename = rmdir = symlink = truncate = unlink = utimens = write = _read_only
