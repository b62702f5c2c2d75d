import pytest

from githubfs.address import parse_address, split_identity
from githubfs.errors import MalformedAddressError


def test_parse_plain_repository():
    address = parse_address("github:octocat/Hello-World")

    assert address.identity == "octocat/Hello-World"
    assert address.repository == "octocat/Hello-World"
    assert address.user_info is None
    assert address.params == {}
    assert address.path is None


def test_parse_without_scheme():
    address = parse_address("octocat/Hello-World!/README")

    assert address.repository == "octocat/Hello-World"
    assert address.path == "/README"


def test_parse_full_address():
    address = parse_address("github:me:s3cret@octocat/Hello-World?revision=v1.0&endpoint=https%3A%2F%2Fghe.example.com%2Fapi%2Fv3!/docs/index.md")

    assert address.identity == "me:s3cret@octocat/Hello-World?revision=v1.0&endpoint=https%3A%2F%2Fghe.example.com%2Fapi%2Fv3"
    assert address.repository == "octocat/Hello-World"
    assert address.user_info == ("me", "s3cret")
    assert address.params == {"revision": "v1.0", "endpoint": "https://ghe.example.com/api/v3"}
    assert address.path == "/docs/index.md"


def test_password_split_on_first_colon():
    address = parse_address("me:pass:word@octocat/Hello-World")

    assert address.user_info == ("me", "pass:word")


def test_at_sign_in_query():
    address = parse_address("github:octocat/Hello-World?login=me@example.com")

    assert address.user_info is None
    assert address.repository == "octocat/Hello-World"
    assert address.params == {"login": "me@example.com"}


def test_user_info_before_query_with_at_sign():
    address = parse_address("github:me:pw@octocat/Hello-World?login=me@example.com")

    assert address.user_info == ("me", "pw")
    assert address.params == {"login": "me@example.com"}


def test_unknown_params_ignored():
    address = parse_address("octocat/Hello-World?foo=bar&oauth=abc&login=me&password=pw")

    assert address.params == {"oauth": "abc", "login": "me", "password": "pw"}


def test_identity_is_verbatim():
    a, _ = split_identity("github:o/r?revision=x&login=y!/a")
    b, _ = split_identity("github:o/r?login=y&revision=x!/b")

    assert a == "o/r?revision=x&login=y"
    assert b == "o/r?login=y&revision=x"
    assert a != b


def test_root_path():
    assert parse_address("github:o/r!/").path == "/"


@pytest.mark.parametrize(
    "address",
    [
        "github:me@octocat/Hello-World",
        "github:octocat/Hello-World?revision",
        "github:Hello-World",
        "github:",
        "github:/octocat",
        "s3:octocat/Hello-World!/README",
        "http://host/x",
        "github:me:pw@s3:octocat/Hello-World",
    ],
)
def test_malformed_addresses(address):
    with pytest.raises(MalformedAddressError) as e:
        parse_address(address)

    assert address in str(e.value)


def test_require_path():
    address = parse_address("github:octocat/Hello-World?revision=master")

    with pytest.raises(MalformedAddressError) as e:
        address.require_path()

    assert "octocat/Hello-World?revision=master" in str(e.value)
    assert "ex. github:" in str(e.value)

    assert parse_address("github:o/r!/README").require_path() == "/README"
