"""
Repository 基类
提供会话管理、异常转换与通用的读操作
"""

import logging
from contextlib import contextmanager
from typing import Generic, TypeVar, Optional, Type, Any, Iterator

from sqlalchemy import select, func, delete
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from config.database import create_session_factory, session_scope
from taskrepo.exceptions import (
    ConstraintViolationException,
    DatabaseConnectionException,
    DatabaseException,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """通用仓储基类，每个操作使用独立的会话"""

    def __init__(self, model: Type[T], engine: Engine):
        self.model = model
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    def close(self):
        """释放连接池"""
        self.engine.dispose()

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        """获取作用域会话，并把 SQLAlchemy 异常转换为仓储异常"""
        try:
            with session_scope(self.session_factory) as db:
                yield db
        except IntegrityError as e:
            logger.error(f"Constraint violation during {operation}: {e.orig}")
            raise ConstraintViolationException(str(e.orig), operation=operation) from e
        except (OperationalError, InterfaceError) as e:
            logger.error(f"Database unreachable during {operation}: {e.orig}")
            raise DatabaseConnectionException(str(e.orig), operation=operation) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error during {operation}: {e}")
            raise DatabaseException(str(e), operation=operation) from e

    def get(self, id: Any) -> Optional[Any]:
        """根据ID获取单条记录"""
        with self._session("get") as db:
            row = db.get(self.model, id)
            return row.to_domain() if row is not None else None

    def count(self) -> int:
        """统计记录数"""
        with self._session("count") as db:
            return db.execute(select(func.count()).select_from(self.model)).scalar() or 0

    def exists(self, id: Any) -> bool:
        """检查记录是否存在"""
        with self._session("exists") as db:
            return db.get(self.model, id) is not None

    def clear(self) -> int:
        """删除全部记录，返回删除的行数"""
        with self._session("clear") as db:
            result = db.execute(delete(self.model))
            return result.rowcount
