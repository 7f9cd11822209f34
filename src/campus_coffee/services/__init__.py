"""
campus_coffee.services

Service layer.

Responsibilities:
- Implement the domain ports on top of the persistence package.
"""

# Package marker.
