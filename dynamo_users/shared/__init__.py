"""
Shared module package.

Contains cross-cutting concerns used by the HTTP layer:
- Error handling and mapping
- Security headers middleware
- Rate limiting
- Logging configuration
"""
