"""
Infrastructure layer package.

Adapters implementing domain ports on top of FastAPI / Starlette.
"""
