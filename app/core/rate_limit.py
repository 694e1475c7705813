"""Rate limiting for the public prompt generator endpoints (slowapi)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# One bucket per client address, shared by all routes decorated with limiter.limit()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
