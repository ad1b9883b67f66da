"""
Backend Learning API — ORM Models
==================================

The service never reads or writes rows; these models exist so the database
probe can count them. Importing the package registers both tables on
`Base.metadata`.
"""

from learning_api.models.post import Post
from learning_api.models.user import User

__all__ = ["Post", "User"]
