"""
Application layer package.

Composes domain primitives into ready-made registration policies.
"""
