# Services package init
"""
EduLibrary Backend — Services Layer
=====================================

What:  Business logic sitting between routes (HTTP) and storage (persistence).

Service Inventory:
    - ResourceService: validation + CRUD orchestration over a ResourceStorage
    - video:           pure helpers turning video page URLs into player URLs
"""
