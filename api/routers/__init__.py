"""
API Routers - Organized endpoint handlers for the paramguard API.

Each router handles a specific domain:
- fancy: Fancy resource CRUD, every endpoint guarded by a request validator
- validators: Introspection of the registered validators
"""
