import io

from .errors import ReadOnlyFileSystemError


class ByteStream(io.RawIOBase):
    """Forward-only reader over the decoded contents of a file."""

    def __init__(self, data, path=None):
        super().__init__()
        self._data = data
        self._position = 0
        self.path = path

    def _check_open(self):
        if self.closed:
            raise ValueError("I/O operation on closed file")

    def readable(self):
        return True

    def writable(self):
        return False

    def readinto(self, buffer):
        self._check_open()
        view = memoryview(buffer)
        n = max(0, min(len(view), len(self._data) - self._position))
        view[:n] = self._data[self._position:self._position + n]
        self._position += n
        return n

    def write(self, data):
        raise ReadOnlyFileSystemError(self.path)

    def truncate(self, size=None):
        raise ReadOnlyFileSystemError(self.path)


class ByteChannel(ByteStream):
    """Random access reader, reads past the end come back short or empty."""

    def seekable(self):
        return True

    def seek(self, offset, whence=io.SEEK_SET):
        self._check_open()
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            position = len(self._data) + offset
        else:
            raise ValueError(f"invalid whence ({whence})")
        if position < 0:
            raise ValueError(f"negative seek position {position}")
        self._position = position
        return position

    def tell(self):
        self._check_open()
        return self._position

    @property
    def position(self):
        return self.tell()

    @position.setter
    def position(self, value):
        self.seek(value)

    def size(self):
        return len(self._data)


class DirectoryStream:
    """
    Lazy sequence of the children of a listed directory.

    Built from a listing that was already fetched, iterating does no I/O.
    Like a java DirectoryStream it can only be iterated once.
    """

    def __init__(self, directory, entries, make_path, filter=None):
        self.directory = directory
        self._entries = entries
        self._make_path = make_path
        self._filter = filter
        self._iterated = False
        self._closed = False

    def __iter__(self):
        if self._closed:
            raise ValueError(f"directory stream of {self.directory} is closed")
        if self._iterated:
            raise ValueError(f"directory stream of {self.directory} was already iterated")
        self._iterated = True
        return self._paths()

    def _paths(self):
        for entry in self._entries:
            if self._closed:
                return
            path = self._make_path(entry)
            if self._filter is None or self._filter(path):
                yield path

    def close(self):
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
