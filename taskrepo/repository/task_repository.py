"""
任务数据访问层
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import select, func, update, delete

from config.database import create_db_engine
from config.settings import Settings, get_settings
from taskrepo.constants import IdConfig
from taskrepo.exceptions import TaskValidationException
from taskrepo.models.database import TaskModel
from taskrepo.models.task import Task
from taskrepo.repository.base import BaseRepository

logger = logging.getLogger(__name__)


class TaskRepository(BaseRepository[TaskModel]):
    """
    任务仓储

    ID 由仓储分配：先查询 max(Id) + 1，再插入。两步之间不加锁，
    并发新增时可能分配到相同的ID并触发主键冲突
    (ConstraintViolationException)，调用方需自行串行化写入。
    """

    def __init__(self, database_url: str, echo: bool = False):
        super().__init__(TaskModel, create_db_engine(database_url, echo=echo))
        logger.debug(f"TaskRepository bound to {self.engine.url!r}")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> 'TaskRepository':
        """根据配置（环境变量 TASKS_DB 等）创建仓储"""
        settings = settings or get_settings()
        return cls(settings.database_url, echo=settings.debug)

    def next_id(self) -> int:
        """计算下一个可用ID，空表时为 1"""
        with self._session("next_id") as db:
            max_id = db.execute(select(func.max(TaskModel.id))).scalar()
        return IdConfig.FIRST_ID if max_id is None else max_id + 1

    def add(self, task: Task) -> Task:
        """新增任务，ID 由仓储分配，完成日期始终为空"""
        if not task.name or not task.name.strip():
            raise TaskValidationException("任务名称不能为空", field="name")
        if task.created_on is None:
            raise TaskValidationException("创建日期不能为空", field="created_on")

        new_id = self.next_id()
        stored = Task(
            id=new_id,
            name=task.name,
            description=task.description,
            created_on=task.created_on,
            closed_on=None
        )

        with self._session("add") as db:
            db.add(TaskModel.from_domain(stored))

        logger.info(f"Task added: id={new_id}, name={stored.name!r}")
        return stored

    def list(self) -> List[Task]:
        """获取全部任务，按ID升序"""
        with self._session("list") as db:
            rows = db.execute(select(TaskModel).order_by(TaskModel.id)).scalars().all()
            return [row.to_domain() for row in rows]

    def mark_completed(self, task_id: int) -> None:
        """将任务的完成日期设为今天，ID 不存在时不做任何操作"""
        today = date.today()
        with self._session("mark_completed") as db:
            result = db.execute(
                update(TaskModel)
                .where(TaskModel.id == task_id)
                .values(closed_on=today)
            )
            affected = result.rowcount

        if affected:
            logger.info(f"Task completed: id={task_id}, closed_on={today.isoformat()}")
        else:
            logger.debug(f"mark_completed ignored, task not found: id={task_id}")

    def delete(self, task_id: int) -> None:
        """删除任务，ID 不存在时不做任何操作"""
        with self._session("delete") as db:
            result = db.execute(delete(TaskModel).where(TaskModel.id == task_id))
            affected = result.rowcount

        if affected:
            logger.info(f"Task deleted: id={task_id}")
        else:
            logger.debug(f"delete ignored, task not found: id={task_id}")
