"""Server-wide constants."""

PROJECT_NAME = "BuzzHub"
API_PREFIX = "/api"
