from stat import S_IFDIR, S_IFREG

from .fuse_errors import fuse_errors

# everything is read only
DIR_MODE = S_IFDIR | 0o555
FILE_MODE = S_IFREG | 0o444


def getattr(self, path, fh=None):
    with fuse_errors():
        attrs = self.filesystem.read_attributes(path)

    if attrs.is_directory:
        st_mode, st_nlink = DIR_MODE, 2
    else:
        st_mode, st_nlink = FILE_MODE, 1

    return dict(
        st_mode=st_mode,
        st_nlink=st_nlink,
        st_size=attrs.size,
        st_uid=self.uid,
        st_gid=self.gid,
        st_atime=self.mount_time,
        st_mtime=self.mount_time,
        st_ctime=self.mount_time,
    )
