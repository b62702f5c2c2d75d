import base64
import logging

from .config import DEFAULT_ENDPOINT, PROFILE_PATH, load_profile

logger = logging.getLogger(__name__)


class Connection:
    """Connection settings of one filesystem, fixed at construction."""

    def __init__(self, login=None, password=None, oauth=None, endpoint=DEFAULT_ENDPOINT, revision=None):
        self.login = login
        self.password = password
        self.oauth = oauth
        self.endpoint = endpoint.rstrip("/")
        self.revision = revision

    @property
    def authorization(self):
        if self.oauth:
            return "token " + self.oauth
        if self.password:
            userpass = f"{self.login or ''}:{self.password}"
            return "Basic " + base64.b64encode(userpass.encode("utf-8")).decode("ascii")
        return None  # anonymous

    @property
    def scheme(self):
        if self.oauth:
            return "token"
        if self.password:
            return "basic"
        return "anonymous"

    def __repr__(self):
        # never show secrets
        return (
            f"Connection(login={self.login!r}, scheme={self.scheme!r}, "
            f"endpoint={self.endpoint!r}, revision={self.revision!r})"
        )


def resolve_connection(address, env=None, profile_path=PROFILE_PATH):
    settings = {
        "login": None,
        "password": None,
        "oauth": None,
        "revision": None,
        "endpoint": None,
    }
    for source in (env or {}, address.params):
        for key in settings:
            if source.get(key) is not None:
                settings[key] = source[key]

    if address.user_info is not None:
        settings["login"], settings["password"] = address.user_info

    if settings["password"] is None and settings["oauth"] is None and profile_path:
        profile = load_profile(profile_path)
        if profile is not None:
            if settings["login"] is None or settings["login"] == profile.get("login"):
                settings["login"] = profile.get("login")
                settings["password"] = profile.get("password")
                settings["oauth"] = profile.get("oauth")
            else:
                logger.debug(
                    f"ignoring credential profile {profile_path}: login {profile.get('login')!r} "
                    f"does not match {settings['login']!r}"
                )

    if not settings["endpoint"]:
        settings["endpoint"] = DEFAULT_ENDPOINT

    return Connection(**settings)
