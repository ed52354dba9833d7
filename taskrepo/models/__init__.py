"""
数据模型
"""

from .task import Task
from .database import TaskModel


__all__ = [
    'Task',
    'TaskModel'
]
