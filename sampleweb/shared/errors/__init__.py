"""
Shared error handling package.

Centralizes result-to-HTTP mapping so that operation outcomes and
uncaught faults are consistently translated into API responses.
"""

from sampleweb.shared.errors.rendering import render, render_result
from sampleweb.shared.errors.translator import ResponseDescriptor, translate

__all__ = ["ResponseDescriptor", "render", "render_result", "translate"]
