"""
Shared module package.

Contains cross-cutting concerns used by the customers context:
- Error handling and mapping
- Security headers and rate limiting
- Logging configuration
"""
