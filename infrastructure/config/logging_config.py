"""日志配置"""

import logging
import os
from typing import Optional

from infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    按配置初始化日志

    控制台始终输出；非测试环境额外写入 log_file。
    重复调用不会重复添加 handler。

    Args:
        settings: 应用配置
        logger: 要配置的日志记录器，默认根记录器

    Returns:
        配置后的日志记录器
    """
    target = logger or logging.getLogger()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    target.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    if not any(getattr(h, "_mail_service_handler", False) for h in target.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console._mail_service_handler = True  # type: ignore[attr-defined]
        target.addHandler(console)

        if not settings.is_test and settings.log_file:
            log_dir = os.path.dirname(settings.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            file_handler._mail_service_handler = True  # type: ignore[attr-defined]
            target.addHandler(file_handler)

    return target
