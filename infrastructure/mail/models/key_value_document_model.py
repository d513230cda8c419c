"""键值文档 SQLAlchemy 数据模型"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy 声明式基类"""
    pass


class KeyValueDocumentModel(Base):
    """
    键值文档数据库模型

    每一行保存点分路径第一段下的整份 JSON 文档（如 "mails"），
    路径其余部分在文档内部解析。
    """

    __tablename__ = "key_value_documents"

    # 主键：路径第一段
    key: Mapped[str] = mapped_column(String(255), primary_key=True)

    # 文档内容
    value: Mapped[Any] = mapped_column(JSON, nullable=True)

    # 时间戳
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    # 版本（乐观锁）
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<KeyValueDocumentModel(key={self.key}, version={self.version})>"
