from .fuse_errors import fuse_errors


def readdir(self, path, fh):
    with fuse_errors():
        with self.filesystem.new_directory_stream(path) as entries:
            names = [entry.name for entry in entries]
    return ['.', '..'] + names
