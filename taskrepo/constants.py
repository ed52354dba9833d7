"""
全局常量定义
表名、列名与字段长度需与既有数据库结构保持一致
"""

from datetime import date


class TableConfig:
    """任务表结构常量"""
    TABLE_NAME = "TASKS"

    COL_ID = "Id"
    COL_NAME = "Name"
    COL_DESCRIPTION = "Description"
    COL_CREATED_ON = "CreatedOn"
    COL_CLOSED_ON = "ClosedOn"

    # Name 为定长字符字段，读取时需去除尾部填充
    NAME_LENGTH = 100
    DESCRIPTION_LENGTH = 255


class IdConfig:
    """ID 分配常量"""
    # 空表时分配的第一个ID
    FIRST_ID = 1


# 旧数据中以最小日期表示"未完成"
LEGACY_UNSET_DATE = date.min
