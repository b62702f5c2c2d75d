#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# based on https://github.com/higlass/simple-httpfs

import argparse
import logging
import os.path as op
import sys

from githubfs.config import environ_defaults
from githubfs.errors import GithubFsError
from githubfs.provider import DISK_CACHE_SIZE, GithubFileSystemProvider
from githubfs.registry import FileSystemRegistry


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="mount a github repository read only",
        prog="githubfs",
    )

    parser.add_argument("mountpoint")

    parser.add_argument(
        "address",
        help="github:[login[:password]@]owner/repository[?revision=...&oauth=...]",
    )

    parser.add_argument(
        "-f",
        "--foreground",
        action="store_true",
        default=False,
        help="Run in the foreground",
    )

    parser.add_argument("--disk-cache-size", default=DISK_CACHE_SIZE, type=int)

    parser.add_argument(
        "--disk-cache-dir",
        default=None,
        help="Keep fetched contents of pinned revisions across mounts",
    )

    parser.add_argument("--lru-capacity", default=400, type=int)

    parser.add_argument(
        "--allow-other",
        action="store_true",
        default=False,
        help="Allow other users to access this fuse",
    )

    parser.add_argument("-l", "--logfile", default=None, type=str)

    parser.add_argument("-v", "--verbose", action="store_true", default=False)

    return parser.parse_args(argv)


def main(argv=None):
    if argv is None and len(sys.argv) == 1:
        # with no args, show full help
        parse_args(["--help"])

    args = parse_args(argv)

    if not op.isdir(args.mountpoint):
        print(f"Mount point must be a directory: {args.mountpoint}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger("githubfs")

    if args.logfile:
        hdlr = logging.FileHandler(args.logfile)
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(module)s: %(message)s"
        )
        hdlr.setFormatter(formatter)
        logger.addHandler(hdlr)

    # libfuse is only needed for mounting
    from fuse import FUSE
    from githubfs.githubfs import GithubFs

    provider = GithubFileSystemProvider(
        FileSystemRegistry(),
        disk_cache_dir=args.disk_cache_dir,
        disk_cache_size=args.disk_cache_size,
    )

    try:
        filesystem = provider.new_filesystem(args.address, environ_defaults())
    except GithubFsError as e:
        print(f"githubfs: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info(f"mounting {filesystem.repository} at {args.mountpoint}")

    FUSE(
        GithubFs(filesystem, lru_capacity=args.lru_capacity, logger=logger),
        args.mountpoint,
        foreground=args.foreground,
        allow_other=args.allow_other,
        ro=True,
        nothreads=True,
    )


if __name__ == "__main__":
    main()
