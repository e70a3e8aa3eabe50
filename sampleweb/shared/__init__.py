"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Result-to-HTTP translation and centralized fault handling
- Security middleware
- Rate limiting
- Logging configuration
"""
