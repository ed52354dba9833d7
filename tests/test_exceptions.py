from taskrepo.exceptions import (
    ConstraintViolationException,
    DatabaseConnectionException,
    DatabaseException,
    TaskRepositoryException,
    TaskValidationException,
)


def test_database_exceptions_share_a_base():
    for exc_type in (DatabaseConnectionException, ConstraintViolationException):
        exc = exc_type("boom", operation="add")
        assert isinstance(exc, DatabaseException)
        assert isinstance(exc, TaskRepositoryException)
        assert exc.operation == "add"


def test_exception_to_dict():
    exc = ConstraintViolationException("UNIQUE constraint failed: TASKS.Id", operation="add")

    assert exc.to_dict() == {
        "code": "constraint_violation",
        "message": "数据库操作失败: UNIQUE constraint failed: TASKS.Id",
        "details": {"operation": "add"},
    }


def test_validation_exception_details():
    exc = TaskValidationException("bad", field="name", value="  ")

    assert exc.code == "task_validation_error"
    assert exc.details == {"field": "name", "value": "  "}
