"""
Job portal accounts backend root package.

This package contains the FastAPI app entry point (main.py), the user API,
account use cases, domain models, and infrastructure (MongoDB, media host).
"""
