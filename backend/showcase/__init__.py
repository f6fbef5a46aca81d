"""
Showcase Backend - Application Package
========================================

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services                    │  ← one store call per operation
    ├─────────────────────────────────────┤
    │   Query Builder & Identifiers       │  ← filters, updates, id parsing
    ├─────────────────────────────────────┤
    │   Database (DocumentStore)          │  ← pymongo async client
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
