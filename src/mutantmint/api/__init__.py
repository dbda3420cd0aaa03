"""Mutant Mint — FastAPI REST API layer.

Modules
-------
main
    FastAPI application with the mint route and the ``main()`` CLI
    entry point.
models
    Pydantic models for request and response bodies.
"""
