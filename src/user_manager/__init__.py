"""
User-Manager - User Records Client

A layered client for the user records of a remote REST user service.

This package provides:
- Domain entities and a three-variant operation result
- An HTTP repository that never leaks transport errors
- Paginated, cached list state with optimistic deletion
- Create/edit form validation
- A command line interface
"""

__version__ = "1.0.0"
__license__ = "MIT"

from user_manager.domain.entities.user import Location, UserDetail, UserPage, UserPreview
from user_manager.domain.value_objects.operation_result import Error, Loading, Success

__all__ = [
    "Error",
    "Loading",
    "Location",
    "Success",
    "UserDetail",
    "UserPage",
    "UserPreview",
]
