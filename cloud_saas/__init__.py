"""
Cloud SaaS Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
the account use cases (register, login, password reset), MongoDB
persistence and the SMTP contact-form integration.
"""
