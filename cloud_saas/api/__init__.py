"""
API layer for the Cloud SaaS backend.

Exposes the JSON endpoints under /api (register, login, forgot, me, contact).
"""
