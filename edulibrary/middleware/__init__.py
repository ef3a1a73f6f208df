# Middleware package init
"""
EduLibrary Backend — Middleware Package
========================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

Request ID runs first so the access log line and every handler log line
share the same correlation id.
"""
