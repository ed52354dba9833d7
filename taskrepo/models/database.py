"""
SQLAlchemy ORM 模型定义
用于数据库持久化操作
"""

from datetime import date, datetime
from typing import Optional
from sqlalchemy import Column, Integer, NCHAR, String, Date
from config.database import Base
from taskrepo.constants import TableConfig, LEGACY_UNSET_DATE


def _as_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


class TaskModel(Base):
    """任务表模型"""
    __tablename__ = TableConfig.TABLE_NAME

    id = Column(TableConfig.COL_ID, Integer, primary_key=True, autoincrement=False)
    name = Column(TableConfig.COL_NAME, NCHAR(TableConfig.NAME_LENGTH), nullable=False)
    description = Column(TableConfig.COL_DESCRIPTION, String(TableConfig.DESCRIPTION_LENGTH), nullable=True)
    created_on = Column(TableConfig.COL_CREATED_ON, Date, nullable=False)
    closed_on = Column(TableConfig.COL_CLOSED_ON, Date, nullable=True)

    def to_domain(self):
        """转换为领域模型"""
        from taskrepo.models.task import Task

        closed_on = _as_date(self.closed_on)
        # 旧数据以最小日期表示未完成
        if closed_on == LEGACY_UNSET_DATE:
            closed_on = None

        return Task(
            id=self.id,
            name=self.name.rstrip() if self.name is not None else self.name,
            description=self.description,
            created_on=_as_date(self.created_on),
            closed_on=closed_on
        )

    @classmethod
    def from_domain(cls, task) -> 'TaskModel':
        """从领域模型创建"""
        return cls(
            id=task.id,
            name=task.name,
            description=task.description,
            created_on=_as_date(task.created_on),
            closed_on=_as_date(task.closed_on)
        )
