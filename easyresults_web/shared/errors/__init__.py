"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that result errors
are consistently translated into API responses.
"""
