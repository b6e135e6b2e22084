"""
Storefront API package.

Provides the FastAPI application for the Storefront backend. The app
instance lives in api.app; it is not imported here so that module routes
can depend on api.dependencies without an import cycle.
"""
