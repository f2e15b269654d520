from .task import Task, TaskStatus, as_utc
from .user import User

# Export all models for easy importing
__all__ = ["Task", "TaskStatus", "User", "as_utc"]
