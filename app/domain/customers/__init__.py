"""
Customers bounded context — domain layer.

This module contains all domain logic for customer onboarding:
- Customer entity and postal Address value object
- Ports for address lookup and customer persistence
- Domain errors raised across the context
"""
