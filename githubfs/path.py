import functools

SEPARATOR = b"/"


@functools.total_ordering
class GithubPath:
    """
    A location inside one GithubFileSystem.

    Only a lookup key: it holds the raw utf-8 bytes of the path and nothing
    fetched from the remote. Equality and hashing compare those bytes exactly,
    "/a//b" and "/a/b" are different paths until normalized.
    """

    def __init__(self, filesystem, path):
        if isinstance(path, str):
            path = path.encode("utf-8")
        self.filesystem = filesystem
        self._path = bytes(path)

    @classmethod
    def _from_parts(cls, filesystem, parts, absolute):
        path = SEPARATOR.join(part.encode("utf-8") for part in parts)
        if absolute:
            path = SEPARATOR + path
        return cls(filesystem, path)

    def __bytes__(self):
        return self._path

    def __str__(self):
        return self._path.decode("utf-8")

    def __repr__(self):
        return f"GithubPath({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, GithubPath):
            return NotImplemented
        return self.filesystem is other.filesystem and self._path == other._path

    def __lt__(self, other):
        if not isinstance(other, GithubPath):
            return NotImplemented
        return self._path < other._path

    def __hash__(self):
        return hash(self._path)

    def is_absolute(self):
        return self._path.startswith(SEPARATOR)

    def to_absolute(self):
        if self.is_absolute():
            return self
        return GithubPath(self.filesystem, SEPARATOR + self._path)

    @property
    def parts(self):
        return tuple(p.decode("utf-8") for p in self._path.split(SEPARATOR) if p)

    def __iter__(self):
        for part in self.parts:
            yield GithubPath(self.filesystem, part)

    @property
    def root(self):
        if self.is_absolute():
            return GithubPath(self.filesystem, SEPARATOR)
        return None

    @property
    def name(self):
        parts = self.parts
        return parts[-1] if parts else ""

    @property
    def parent(self):
        parts = self.parts
        if not parts:
            return None
        if len(parts) == 1 and not self.is_absolute():
            return None
        return GithubPath._from_parts(self.filesystem, parts[:-1], self.is_absolute())

    def resolve(self, other):
        if not isinstance(other, GithubPath):
            other = GithubPath(self.filesystem, other)
        if other.is_absolute() or not self._path:
            return GithubPath(self.filesystem, other._path)
        if not other._path:
            return self
        if self._path.endswith(SEPARATOR):
            return GithubPath(self.filesystem, self._path + other._path)
        return GithubPath(self.filesystem, self._path + SEPARATOR + other._path)

    def joinpath(self, *others):
        path = self
        for other in others:
            path = path.resolve(other)
        return path

    __truediv__ = resolve

    def normalize(self):
        parts = []
        for part in self.parts:
            if part == ".":
                continue
            if part == "..":
                if parts and parts[-1] != "..":
                    parts.pop()
                elif not self.is_absolute():
                    parts.append(part)
                # ".." at the root stays at the root
                continue
            parts.append(part)
        return GithubPath._from_parts(self.filesystem, parts, self.is_absolute())

    def relativize(self, other):
        if self.is_absolute() != other.is_absolute():
            raise ValueError(f"cannot relativize {other} against {self}")
        base = self.normalize().parts
        target = other.normalize().parts
        common = 0
        while common < min(len(base), len(target)) and base[common] == target[common]:
            common += 1
        parts = [".."] * (len(base) - common) + list(target[common:])
        return GithubPath._from_parts(self.filesystem, parts, False)

    def startswith(self, other):
        if not isinstance(other, GithubPath):
            other = GithubPath(self.filesystem, other)
        if self.is_absolute() != other.is_absolute():
            return False
        return self.parts[:len(other.parts)] == other.parts

    def endswith(self, other):
        if not isinstance(other, GithubPath):
            other = GithubPath(self.filesystem, other)
        if other.is_absolute():
            return self == other
        n = len(other.parts)
        return n <= len(self.parts) and self.parts[len(self.parts) - n:] == other.parts
