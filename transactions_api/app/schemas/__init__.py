"""
Pydantic schema definitions for API payloads.

Field names follow the JSON wire format (``perPage``, ``dateOfSale``,
``itemCount``) so that responses match what existing dashboard clients
expect.
"""
