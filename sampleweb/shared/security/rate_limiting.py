"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every
route through ``SlowAPIMiddleware``. Each application instance owns
its own limiter and in-memory counters.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from sampleweb.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter described by ``settings``.

    Args:
        settings: Application settings providing the default limit.

    Returns:
        A limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )
