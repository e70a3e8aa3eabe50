"""
Domain layer package.

Contains the operation result type shared by every bounded context
and the bounded contexts themselves. No framework imports allowed.
"""
