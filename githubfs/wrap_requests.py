import logging
import time

logger = logging.getLogger(__name__)

# warn once fewer requests than this are left in the rate limit window
RATELIMIT_LOW = 20


def log_ratelimit(response, *args, **kwargs):
    if "X-RateLimit-Remaining" not in response.headers:
        return
    try:
        remain = int(response.headers["X-RateLimit-Remaining"])
        reset = int(response.headers.get("X-RateLimit-Reset", 0))
    except ValueError:
        return
    message = "ratelimit status: used %s of %s. next reset in %s" % (
        response.headers.get("X-RateLimit-Used", "?"),
        response.headers.get("X-RateLimit-Limit", "?"),
        time.strftime("%M:%S", time.gmtime(max(0, reset - time.time()))),
    )
    if remain < RATELIMIT_LOW:
        logger.warning(message)
    else:
        logger.debug(message)


def wrap_requests(session):
    """Hook rate limit reporting into every response of session."""
    hooks = session.hooks.setdefault("response", [])
    if log_ratelimit not in hooks:
        hooks.append(log_ratelimit)
    return session
