"""
Infrastructure adapters for the customers bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: the customer store or the zip code API.
"""
