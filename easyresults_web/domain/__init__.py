"""
Domain layer package.

Contains the outcome model, status classification and the result
dispatcher. This layer has ZERO framework dependencies.
No FastAPI imports, no IO, no side effects.
"""
