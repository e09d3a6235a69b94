"""
Application Layer for the Workout XP API.

This package contains:
- use_cases/: Entry points for business operations
- exceptions.py: Errors raised by use cases and mapped to HTTP by routers
"""
