"""
Repository 数据访问层
"""

from .base import BaseRepository
from .task_repository import TaskRepository

__all__ = ['BaseRepository', 'TaskRepository']
