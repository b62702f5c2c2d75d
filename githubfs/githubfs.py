# based on
# https://github.com/higlass/simple-httpfs
# http://thepythoncorner.com/dev/writing-a-fuse-filesystem-in-python/

from fuse import LoggingMixIn, Operations


class GithubFs(LoggingMixIn, Operations):

    from .init import __init__

    from .getattr import getattr
    from .readdir import readdir
    from .read import open, read, release

    from .write_methods import (  # read only
        chmod,
        chown,
        create,
        link,
        mkdir,
        mknod,
        rename,
        rmdir,
        symlink,
        truncate,
        unlink,
        utimens,
        write,
    )

    def destroy(self, path):
        self.filesystem.close()
