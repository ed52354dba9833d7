"""
任务数据模型定义
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass
class Task:
    """任务模型"""
    name: str
    created_on: date
    description: Optional[str] = None

    # 由仓储在新增时分配
    id: Optional[int] = None

    # 未完成时为 None，完成时为标记当天的日期
    closed_on: Optional[date] = None

    def __post_init__(self):
        if isinstance(self.created_on, datetime):
            self.created_on = self.created_on.date()
        if isinstance(self.closed_on, datetime):
            self.closed_on = self.closed_on.date()

    @property
    def is_completed(self) -> bool:
        """是否已完成"""
        return self.closed_on is not None

    @property
    def is_open(self) -> bool:
        return not self.is_completed
