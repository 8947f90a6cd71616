"""Log level and line format.

The format references the correlation fields stamped by
``consult_relay.logging.context``; unset fields print as ``-``.
"""

import os

APP_LOG_LEVEL = os.getenv("APP_LOG_LEVEL", "").strip().upper() or "INFO"
APP_LOG_FORMAT = os.getenv(
    "APP_LOG_FORMAT",
    "%(asctime)s %(levelname)-7s %(name)s "
    "[session=%(session_id)s req=%(request_id)s client=%(client_id)s] %(message)s",
)
APP_LOG_DATEFMT = os.getenv("APP_LOG_DATEFMT", "%Y-%m-%dT%H:%M:%S")

__all__ = ["APP_LOG_LEVEL", "APP_LOG_FORMAT", "APP_LOG_DATEFMT"]
