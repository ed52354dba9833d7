"""
任务数据访问层
"""

from taskrepo.models import Task
from taskrepo.repository import TaskRepository

__all__ = ['Task', 'TaskRepository']
