"""
API layer for the accounts backend.

Exposes the user endpoints under /api/v1/user (register, login, logout,
profile update) and the exception handlers that shape every error response.
"""
