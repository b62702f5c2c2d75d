import logging
import os

import requests

FALSY = {0, "0", False, "false", "False", "FALSE", "off", "OFF"}

logger = logging.getLogger(__name__)


class FetchError(IOError):
    """A request that did not produce a json body."""

    def __init__(self, url, reason, status_code=None):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


class HttpFetcher:
    SSL_VERIFY = os.environ.get("SSL_VERIFY", True) not in FALSY

    def __init__(self, session=None, timeout=None):
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.total_requests = 0
        if not self.SSL_VERIFY:
            logger.warning(
                "You have set ssl certificates to not be verified. "
                "This may leave you vulnerable. "
                "http://docs.python-requests.org/en/master/user/advanced/#ssl-cert-verification"
            )

    def get_json(self, url, headers=None):
        # no retries here, callers decide
        self.total_requests += 1
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(
                url,
                headers=headers or {},
                verify=self.SSL_VERIFY,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise FetchError(url, e) from e

        # requests already undid Content-Encoding: gzip
        if not 200 <= response.status_code < 300:
            raise FetchError(url, f"status {response.status_code} {response.reason}", response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(url, f"malformed json: {e}", response.status_code) from e

    def close(self):
        self.session.close()
