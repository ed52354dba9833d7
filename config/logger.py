"""
日志配置模块
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from config.settings import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger(__name__)


def setup_logger(level: Optional[str] = None, log_dir: Optional[str] = None, to_file: bool = True):
    """
    设置日志配置

    Args:
        level: 日志级别，默认取 LOG_LEVEL
        log_dir: 日志目录，默认取 LOGS_DIR
        to_file: 为 False 时只输出到控制台
    """
    settings = get_settings()
    level = level or settings.log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = None
    if to_file:
        log_path = Path(log_dir) if log_dir else settings.logs_path
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / settings.logs_name

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=settings.log_max_bytes_in_bytes,
            backupCount=settings.log_backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger.info(f"{settings.app_name} logging configured: level={logging.getLevelName(log_level)}, file={log_file}")
    return root_logger
