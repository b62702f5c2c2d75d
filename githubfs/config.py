import configparser
import logging
import os

from .errors import CredentialProfileError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.github.com"

# per-user credential profile, flat key=value
PROFILE_PATH = os.path.join(os.path.expanduser("~"), ".github")
PROFILE_KEYS = ("login", "password", "oauth")

ENV_PREFIX = "GITHUBFS_"
ENV_KEYS = ("login", "password", "oauth", "revision", "endpoint")


def environ_defaults(environ=None):
    """Collect GITHUBFS_LOGIN, GITHUBFS_OAUTH, ... into an env mapping."""
    if environ is None:
        environ = os.environ
    env = {}
    for key in ENV_KEYS:
        value = environ.get(ENV_PREFIX + key.upper())
        if value:
            env[key] = value
    return env


def load_profile(path=PROFILE_PATH):
    """
    Read the credential profile at path.

    Returns None when there is no such file. The file has no sections, so a
    dummy one is put in front before handing it to configparser.
    """
    if not os.path.isfile(path):
        logger.debug(f"no credential profile at {path}")
        return None

    parser = configparser.ConfigParser(interpolation=None, strict=False)
    try:
        with open(path, "r") as f:
            parser.read_string("[profile]\n" + f.read(), path)
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        raise CredentialProfileError(f"failed to read credential profile {path}: {e}") from e

    section = parser["profile"]
    profile = {key: section[key] for key in PROFILE_KEYS if key in section}
    logger.debug(f"loaded credential profile {path} with keys {sorted(profile)}")
    return profile
