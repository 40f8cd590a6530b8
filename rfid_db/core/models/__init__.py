"""
Models shared by the HTTP layer.

- io: request and response schemas
"""
