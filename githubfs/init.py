import logging
import os
import time

from httpfs.lru_cache import LRUCache


def __init__(self, filesystem, lru_capacity=400, logger=None):
    self.filesystem = filesystem
    self.loader = filesystem.loader

    # decoded file contents, the loader only keeps base64
    self.lru_cache = LRUCache(capacity=lru_capacity)

    self.log = logger or logging.getLogger("githubfs")
    self.uid = os.getuid()
    self.gid = os.getgid()
    self.mount_time = time.time()

    self.log.info(f"init githubfs {filesystem.repository} revision {filesystem.revision or '(default branch)'}")
