"""
Core app - shared plumbing for every router.

- Health endpoints (ping / sayhello)
- JSON error rendering registered on the NinjaAPI instance
"""
