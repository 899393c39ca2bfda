"""Informational diagnostics forwarded to the host message channel."""
import logging
from typing import Callable, Optional

Notify = Callable[[str], None]

logger = logging.getLogger("desktop_recentf.recent.notices")


def emit_notice(log: logging.Logger, message: str, notify: Optional[Notify] = None) -> None:
    """Log message at INFO and hand it to the host's notify hook.

    Never raises: a failing hook is logged and ignored.
    """
    log.info(message)
    if notify is None:
        return
    try:
        notify(message)
    except Exception as e:
        logger.warning("Notify hook failed for %r: %s", message, e)
