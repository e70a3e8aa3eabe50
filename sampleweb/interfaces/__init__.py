"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
No business logic belongs here. Routes call use cases and render
their results through the shared result translator.
"""
