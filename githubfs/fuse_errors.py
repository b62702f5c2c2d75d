from contextlib import contextmanager
from errno import EIO

from fuse import FuseOSError


@contextmanager
def fuse_errors():
    """Hand OSErrors from the loader to fuse with their errno."""
    try:
        yield
    except FuseOSError:
        raise
    except OSError as e:
        raise FuseOSError(e.errno or EIO) from e
