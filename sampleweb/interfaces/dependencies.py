"""
Dependencies shared by all routers.
"""

from fastapi import Request

from sampleweb.core.config import Settings


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings
