from collections import namedtuple
from urllib.parse import unquote_plus

from .errors import MalformedAddressError

SCHEME = "github"

# separates the repository identity from the path inside the repository
PATH_MARKER = "!/"

PARAM_KEYS = ("revision", "login", "oauth", "password", "endpoint")

USAGE_EXAMPLE = "github:apache/karaf?revision=master!/"


class Address(namedtuple("Address", ["identity", "repository", "user_info", "params", "path"])):
    __slots__ = ()

    def require_path(self):
        if self.path is None:
            raise MalformedAddressError(
                f"address {self.identity!r} does not contain path info ex. {USAGE_EXAMPLE}"
            )
        return self.path


def strip_scheme(address):
    prefix = SCHEME + ":"
    if address.startswith(prefix):
        return address[len(prefix):]
    return address


def split_identity(address):
    """
    Return the identity part of an address and the path after the marker.

    The identity is the scheme-specific part up to the path marker, taken
    verbatim. Two addresses that differ only in query parameter order are
    different identities.
    """
    ssp = strip_scheme(address)
    i = ssp.find(PATH_MARKER)
    if i < 0:
        return ssp, None
    # keep the leading slash of the path
    return ssp[:i], ssp[i + 1:]


def parse_query(query, address):
    params = {}
    for pair in query.split("&"):
        if not pair:
            continue
        key, sep, value = pair.partition("=")
        if not sep:
            raise MalformedAddressError(f"address {address!r} has malformed query parameter {pair!r}")
        key = unquote_plus(key)
        if key in PARAM_KEYS:
            params[key] = unquote_plus(value)
    return params


def parse_address(address):
    identity, path = split_identity(address)

    rest = identity
    user_info = None
    # an @ in the query belongs to a parameter value
    i = rest.partition("?")[0].find("@")
    if i >= 0:
        login, sep, password = rest[:i].partition(":")
        if not sep:
            raise MalformedAddressError(
                f"address {address!r} has user-info without password, expected login:password@"
            )
        user_info = (login, password)
        rest = rest[i + 1:]

    params = {}
    i = rest.find("?")
    if i >= 0:
        params = parse_query(rest[i + 1:], address)
        rest = rest[:i]

    if not rest or rest.startswith("/") or "/" not in rest:
        raise MalformedAddressError(
            f"address {address!r} does not name an owner/repository ex. {USAGE_EXAMPLE}"
        )
    if ":" in rest.partition("/")[0]:
        raise MalformedAddressError(
            f"address {address!r} is not a {SCHEME} address ex. {USAGE_EXAMPLE}"
        )

    return Address(identity, rest, user_info, params, path)
