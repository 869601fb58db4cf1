"""
API routers for the BuzzHub server. Every router is mounted under ``/api``
except ``health``.
"""
