"""
BuzzHub models.

- enums: closed vocabularies (roles, statuses, reaction types)
- io: request/response schemas for the HTTP API
"""
