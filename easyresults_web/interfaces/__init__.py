"""
Interfaces layer package.

FastAPI routers, Pydantic schemas and dependency providers.
"""
