"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain error kinds
are consistently translated into API responses.
"""
