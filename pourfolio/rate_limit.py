"""Shared slowapi limiter.

Routes decorated with ``limiter.limit`` use their own limit; every other
route gets the global per-minute default.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from pourfolio.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.rate_limit_per_minute}/minute"],
)
