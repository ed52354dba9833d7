"""
统一异常定义
提供结构化的错误处理机制
"""

from typing import Optional, Any, Dict


class TaskRepositoryException(Exception):
    """基础异常类"""

    def __init__(self, message: str, code: str = 'error', details: Optional[Dict] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class TaskValidationException(TaskRepositoryException):
    """任务参数验证异常"""

    def __init__(self, message: str, field: Optional[str] = None, value: Optional[Any] = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message,
            code='task_validation_error',
            details=details
        )


class DatabaseException(TaskRepositoryException):
    """数据库操作异常"""

    def __init__(self, message: str, operation: Optional[str] = None, code: str = 'database_error'):
        self.operation = operation
        details = {"operation": operation} if operation else {}
        super().__init__(
            f"数据库操作失败: {message}",
            code=code,
            details=details
        )


class DatabaseConnectionException(DatabaseException):
    """数据库不可达异常，不做重试，直接抛给调用方"""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, operation=operation, code='database_unreachable')


class ConstraintViolationException(DatabaseException):
    """约束冲突异常（如并发新增时主键重复）"""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, operation=operation, code='constraint_violation')
