from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

# 基类
Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """根据连接串创建引擎"""
    return create_engine(
        database_url,
        pool_pre_ping=True,
        echo=echo
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """创建会话工厂"""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """
    数据库会话上下文管理器

    成功时提交，异常时回滚，任何情况下都会关闭会话。

    使用方式:
        with session_scope(factory) as db:
            tasks = db.query(TaskModel).all()
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(engine: Engine):
    """初始化数据库表（已存在的表不会重建）"""
    from taskrepo.models.database import TaskModel  # noqa: F401
    Base.metadata.create_all(bind=engine)


def drop_db(engine: Engine):
    """删除数据库表"""
    from taskrepo.models.database import TaskModel  # noqa: F401
    Base.metadata.drop_all(bind=engine)
