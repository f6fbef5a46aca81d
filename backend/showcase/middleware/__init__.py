# Middleware package init
"""
Showcase Backend - Middleware Package
=======================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

The request id is set before the access logger runs, so the access line
and every log line emitted by the handler share it.
"""
