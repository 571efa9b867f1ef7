# Services package init
"""
Inner Peace Backend — Services Layer
=====================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services accept a session plus request data, apply the business rules,
       and return response schemas or raise application exceptions.

Service Inventory:
    - PostService: posts and suggestions (list, create, delete, init-db)
"""
