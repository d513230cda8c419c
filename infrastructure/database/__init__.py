"""
数据库基础设施模块
"""

from .database_factory import DatabaseFactory

__all__ = ["DatabaseFactory"]
