"""
Core app - Shared abstractions and utilities.

This app provides platform-agnostic interfaces for:
- Document storage (TaskStoreInterface)

These abstractions allow switching between:
- MongoDB (production)
- In-memory store (development and testing)
"""
