"""Fixtures shared by the githubfs tests."""

import base64
import threading

import pytest

from githubfs.provider import GithubFileSystemProvider
from githubfs.registry import FileSystemRegistry
from httpfs.fetchers import FetchError

ENDPOINT = "https://api.github.com"


class FakeFetcher:
    """Serves canned json bodies by url and records every request."""

    def __init__(self):
        self.responses = {}
        self.calls = []
        self._lock = threading.Lock()

    def add(self, url, body=None, status_code=200):
        self.responses[url] = (status_code, body)

    def get_json(self, url, headers=None):
        with self._lock:
            self.calls.append((url, dict(headers or {})))
        if url not in self.responses:
            raise FetchError(url, "status 404 Not Found", 404)
        status_code, body = self.responses[url]
        if not 200 <= status_code < 300:
            raise FetchError(url, f"status {status_code}", status_code)
        return body

    @property
    def urls(self):
        return [url for url, _ in self.calls]


def contents_url(repository, path, revision=None):
    url = f"{ENDPOINT}/repos/{repository}/contents{path}"
    if revision is not None:
        url += "?rev=" + revision
    return url


def file_body(name, path, data, type="file"):
    return {
        "type": type,
        "name": name,
        "path": path,
        "size": len(data),
        "encoding": "base64",
        "content": base64.encodebytes(data).decode("ascii"),
    }


def dir_entry(name, path, type="file", size=0):
    return {"type": type, "name": name, "path": path, "size": size}


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def registry():
    return FileSystemRegistry()


@pytest.fixture
def provider(registry, fetcher, tmp_path):
    # point the profile somewhere empty so ~/.github never leaks into tests
    return GithubFileSystemProvider(
        registry, fetcher=fetcher, profile_path=str(tmp_path / "no-profile")
    )


@pytest.fixture
def hello_world(fetcher):
    """octocat/Hello-World at master with a README and a docs directory."""
    repo = "octocat/Hello-World"
    fetcher.add(
        contents_url(repo, "/README", "master"),
        {"type": "file", "size": 13, "content": "SGVsbG8sIFdvcmxkIQ=="},
    )
    fetcher.add(
        contents_url(repo, "/", "master"),
        [
            dir_entry("README", "README", size=13),
            dir_entry("docs", "docs", type="dir"),
        ],
    )
    fetcher.add(
        contents_url(repo, "/docs", "master"),
        [
            dir_entry("index.md", "docs/index.md", size=5),
            dir_entry("guide.txt", "docs/guide.txt", size=3),
        ],
    )
    fetcher.add(contents_url(repo, "/docs/index.md", "master"), file_body("index.md", "docs/index.md", b"# Hi\n"))
    return "github:octocat/Hello-World?revision=master"
