"""
FastAPI routers, schemas and dependencies for the weather bounded context.
"""
