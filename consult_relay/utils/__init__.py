"""Small shared utilities."""

from .env import env_csv, env_flag
from .time_utils import iso_timestamp, utc_now

__all__ = [
    "env_csv",
    "env_flag",
    "iso_timestamp",
    "utc_now",
]
