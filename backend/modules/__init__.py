"""
Feature modules for the waitlist backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for stored records and payloads
- service.py: Business logic implementation
- routes.py: FastAPI route handlers

Modules communicate through interfaces, not concrete implementations.
All of them keep their records in the shared JSON document store.
"""
