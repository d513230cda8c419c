"""数据库引擎与 Session 工厂"""

import os
from typing import Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from infrastructure.config.settings import Settings, get_settings
from infrastructure.mail.models.key_value_document_model import Base


class DatabaseFactory:
    """
    数据库工厂

    按当前环境创建引擎：
    - test: SQLite 内存数据库（StaticPool，所有连接共享同一个库）
    - dev: SQLite 文件数据库
    - staging/prod: 配置的数据库 URL，带连接池参数
    """

    @staticmethod
    def create_engine(settings: Optional[Settings] = None) -> Engine:
        """创建数据库引擎并确保表已存在"""
        settings = settings or get_settings()
        url = settings.database_url
        if not url:
            raise ValueError(f"Database URL is not configured for environment '{settings.app_env}'")

        if settings.is_test:
            engine = create_engine(
                url,
                echo=settings.debug,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        elif url.startswith("sqlite"):
            db_dir = os.path.dirname(settings.dev_db_path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)
            # 存储调用在工作线程中执行
            engine = create_engine(
                url,
                echo=settings.debug,
                connect_args={"check_same_thread": False},
            )
        else:
            engine = create_engine(
                url,
                echo=settings.debug,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=True,
            )

        Base.metadata.create_all(engine)
        return engine

    @staticmethod
    def create_session_factory(engine: Engine) -> sessionmaker:
        """创建 Session 工厂"""
        return sessionmaker(bind=engine, expire_on_commit=False)
