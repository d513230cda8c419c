"""键值存储 SQLAlchemy 实现"""

import asyncio
import copy
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from sqlalchemy import update
from sqlalchemy.orm import Session, sessionmaker

from domain.common.exceptions import ConcurrentModificationException
from domain.mail.services.key_value_store import KeyValueStore
from infrastructure.mail.models.key_value_document_model import KeyValueDocumentModel
from infrastructure.mail.stores import document_path

T = TypeVar("T")


class SqlAlchemyKeyValueStore(KeyValueStore):
    """
    键值存储 SQLAlchemy 实现

    路径前 key_depth 段（默认两段，如 "mails.<user_id>"）对应一行记录，
    其余部分在行内 JSON 文档中解析，因此不同用户的写入互不影响。
    每次写操作都在单个事务中完成“读取-修改-写回”，
    写回时校验 version，版本不一致抛出 ConcurrentModificationException。

    同步的数据库调用通过 asyncio.to_thread 放到线程中执行，不阻塞事件循环。
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        key_depth: int = 2,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化存储

        Args:
            session_factory: SQLAlchemy Session 工厂
            key_depth: 组成行主键的路径段数
            logger: 可选的日志记录器
        """
        if key_depth < 1:
            raise ValueError("key_depth must be at least 1")
        self._session_factory = session_factory
        self._key_depth = key_depth
        self._logger = logger or logging.getLogger(__name__)

    async def exists(self, path: str) -> bool:
        segments = document_path.split_path(path)
        document, _ = await asyncio.to_thread(self._read, self._prefix(segments))
        return document_path.has_value(document, segments)

    async def get(self, path: str) -> Any:
        segments = document_path.split_path(path)
        document, _ = await asyncio.to_thread(self._read, self._prefix(segments))
        return document_path.get_value(document, segments)

    async def set_if_absent(self, path: str, value: Any) -> bool:
        segments = document_path.split_path(path)
        return await self._run_mutation(
            segments,
            lambda document: document_path.set_if_absent(document, segments, value),
        )

    async def append(self, path: str, item: Any) -> None:
        segments = document_path.split_path(path)
        await self._run_mutation(
            segments,
            lambda document: document_path.append(document, segments, item),
        )

    async def remove_at(self, path: str, index: int) -> Any:
        segments = document_path.split_path(path)
        return await self._run_mutation(
            segments,
            lambda document: document_path.remove_at(document, segments, index),
        )

    async def increment(self, path: str, amount: int = 1, initial: int = 0) -> int:
        segments = document_path.split_path(path)
        return await self._run_mutation(
            segments,
            lambda document: document_path.increment(document, segments, amount, initial),
        )

    async def append_with_counter(
        self,
        list_path: str,
        counter_path: str,
        build_item: Callable[[int], Any],
        amount: int = 1,
        initial: int = 0,
    ) -> Any:
        list_segments = document_path.split_path(list_path)
        counter_segments = document_path.split_path(counter_path)
        self._require_same_row(list_segments, counter_segments)
        return await self._run_mutation(
            list_segments,
            lambda document: document_path.append_with_counter(
                document, list_segments, counter_segments, build_item, amount, initial
            ),
        )

    async def move(
        self,
        source: str,
        target: str,
        match: Callable[[Any], bool],
    ) -> Optional[Any]:
        source_segments = document_path.split_path(source)
        target_segments = document_path.split_path(target)
        self._require_same_row(source_segments, target_segments)
        return await self._run_mutation(
            source_segments,
            lambda document: document_path.move(document, source_segments, target_segments, match),
        )

    def _prefix(self, segments: List[str]) -> List[str]:
        """行主键对应的路径前缀（路径较短时取整条路径）"""
        return segments[: self._key_depth]

    def _require_same_row(self, first: List[str], second: List[str]) -> None:
        if self._prefix(first) != self._prefix(second):
            # 跨行修改无法在单行版本校验内完成
            raise ValueError("Both paths must belong to the same stored document")

    async def _run_mutation(self, segments: List[str], operation: Callable[[Dict[str, Any]], T]) -> T:
        return await asyncio.to_thread(self._mutate, self._prefix(segments), operation)

    def _read(self, prefix: List[str]) -> Tuple[Dict[str, Any], int]:
        """读取一行文档，返回 (嵌套到 prefix 下的文档, version)"""
        key = ".".join(prefix)
        with self._session_factory() as session:
            model = session.get(KeyValueDocumentModel, key)
            if model is None or model.value is None:
                return {}, 0
            return document_path.nest(prefix, copy.deepcopy(model.value)), model.version

    def _mutate(self, prefix: List[str], operation: Callable[[Dict[str, Any]], T]) -> T:
        """
        在单个事务中修改一行文档

        Args:
            prefix: 行主键对应的路径前缀
            operation: 修改文档的函数，返回值原样返回给调用方

        Raises:
            ConcurrentModificationException: 写回时版本已被其他事务更新
        """
        key = ".".join(prefix)
        with self._session_factory() as session:
            model = session.get(KeyValueDocumentModel, key)
            version = model.version if model is not None else 0
            document: Dict[str, Any] = {}
            if model is not None and model.value is not None:
                document = document_path.nest(prefix, copy.deepcopy(model.value))

            result = operation(document)

            value = document_path.extract(document, prefix)
            if value is None:
                session.rollback()
                return result

            if model is None:
                session.add(
                    KeyValueDocumentModel(
                        key=key,
                        value=value,
                        version=1,
                        updated_at=datetime.now(timezone.utc),
                    )
                )
            else:
                self._write_versioned(session, key, value, version)

            session.commit()
            return result

    def _write_versioned(self, session: Session, key: str, value: Any, version: int) -> None:
        statement = (
            update(KeyValueDocumentModel)
            .where(KeyValueDocumentModel.key == key)
            .where(KeyValueDocumentModel.version == version)
            .values(
                value=value,
                version=version + 1,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        outcome = session.execute(statement)
        if outcome.rowcount != 1:
            session.rollback()
            current = session.get(KeyValueDocumentModel, key)
            actual = current.version if current is not None else 0
            self._logger.warning(f"Version conflict on document '{key}': expected {version}, found {actual}")
            raise ConcurrentModificationException(
                resource=f"Document '{key}'", expected_version=version, actual_version=actual
            )
