import re

from .errors import UnsupportedSyntaxError

# escaped outside of a character class
REGEX_META = set(".()+|^$@%")

# escaped inside a character class, to keep re from reading set operations
CLASS_META = set("[&~|")


def glob_to_regex(pattern):
    """
    Translate a shell glob into a regular expression.

    A small scanner with three states: normal text, inside a [class] and
    inside one or more {groups}. Groups nest, classes do not.
    """
    out = []
    in_class = False
    class_start = -1
    group_depth = 0

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]

        if ch == "\\":
            i += 1
            if i >= n:
                out.append("\\\\")
            elif pattern[i] == ",":
                out.append(",")
            else:
                out.append(re.escape(pattern[i]))

        elif in_class:
            if ch == "]":
                out.append("]")
                in_class = False
            elif ch == "!" and i == class_start:
                out.append("^")
            elif ch == "^" and i == class_start:
                out.append("\\^")
            elif ch in CLASS_META:
                out.append("\\" + ch)
            else:
                # * ? { } , lose their meaning here
                out.append(ch)

        elif ch == "*":
            out.append(".*")
        elif ch == "?":
            out.append(".")
        elif ch == "[":
            out.append("[")
            in_class = True
            class_start = i + 1
        elif ch == "{":
            out.append("(?:")
            group_depth += 1
        elif ch == "}" and group_depth > 0:
            out.append(")")
            group_depth -= 1
        elif ch == "," and group_depth > 0:
            out.append("|")
        elif ch in REGEX_META or ch in "]}":
            out.append("\\" + ch)
        else:
            out.append(ch)

        i += 1

    return "".join(out)


class PathMatcher:

    def __init__(self, syntax, pattern, regex):
        self.syntax = syntax
        self.pattern = pattern
        self.regex = regex

    def matches(self, path):
        return self.regex.fullmatch(str(path)) is not None

    # lets a matcher be used as a directory stream filter
    __call__ = matches

    def __repr__(self):
        return f"PathMatcher({self.syntax}:{self.pattern})"


def get_path_matcher(syntax_and_pattern):
    colon = syntax_and_pattern.find(":")
    if colon <= 0 or colon == len(syntax_and_pattern) - 1:
        raise ValueError(
            f'syntax_and_pattern must have form "syntax:pattern" but was "{syntax_and_pattern}"'
        )

    syntax = syntax_and_pattern[:colon]
    pattern = syntax_and_pattern[colon + 1:]
    if syntax == "glob":
        expr = glob_to_regex(pattern)
    elif syntax == "regex":
        expr = pattern
    else:
        raise UnsupportedSyntaxError(f"Unsupported syntax '{syntax}'")

    try:
        regex = re.compile(expr)
    except re.error as e:
        raise ValueError(f"invalid {syntax} pattern {pattern!r}: {e}") from e
    return PathMatcher(syntax, pattern, regex)
