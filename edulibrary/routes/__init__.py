# Routes package init
"""
EduLibrary Backend — API Routes Package
=========================================

Route Inventory:
    - resources.py: GET/POST /api/resources, GET/PATCH/DELETE /api/resources/{id}
    - health.py:    GET /health

Routes stay thin: read the request, call ResourceService, return the model.
Errors are raised as exceptions and formatted by the handlers in main.py.
"""
