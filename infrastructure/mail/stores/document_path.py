"""点分路径文档操作

内存存储与数据库存储共用的纯函数，直接修改传入的文档（嵌套 dict）。
"""

import copy
from typing import Any, Callable, Dict, List, Optional

from domain.common.exceptions import EntityNotFoundException, InvalidOperationException

_MISSING = object()


def split_path(path: str) -> List[str]:
    """
    拆分点分路径

    Raises:
        InvalidOperationException: 路径为空或包含空段
    """
    if not isinstance(path, str) or not path:
        raise InvalidOperationException(operation="split_path", reason="Path must be a non-empty string")
    segments = path.split(".")
    if any(not segment for segment in segments):
        raise InvalidOperationException(operation="split_path", reason=f"Invalid path: '{path}'")
    return segments


def _join(segments: List[str]) -> str:
    return ".".join(segments)


def _lookup(document: Dict[str, Any], segments: List[str]) -> Any:
    node: Any = document
    for segment in segments:
        if not isinstance(node, dict) or segment not in node:
            return _MISSING
        node = node[segment]
    return node


def _parent(document: Dict[str, Any], segments: List[str], create: bool = False) -> Dict[str, Any]:
    node = document
    for depth, segment in enumerate(segments[:-1]):
        child = node.get(segment)
        if child is None:
            if not create:
                raise EntityNotFoundException(entity="Path", identifier=_join(segments[: depth + 1]))
            child = {}
            node[segment] = child
        if not isinstance(child, dict):
            raise InvalidOperationException(
                operation="resolve_path",
                reason=f"Value at '{_join(segments[: depth + 1])}' is not a document",
            )
        node = child
    return node


def _list(document: Dict[str, Any], segments: List[str], create: bool = False) -> List[Any]:
    parent = _parent(document, segments)
    value = parent.get(segments[-1])
    if value is None:
        if not create:
            raise EntityNotFoundException(entity="Path", identifier=_join(segments))
        value = []
        parent[segments[-1]] = value
    if not isinstance(value, list):
        raise InvalidOperationException(
            operation="resolve_path", reason=f"Value at '{_join(segments)}' is not a list"
        )
    return value


def has_value(document: Dict[str, Any], segments: List[str]) -> bool:
    return _lookup(document, segments) not in (_MISSING, None)


def get_value(document: Dict[str, Any], segments: List[str]) -> Any:
    value = _lookup(document, segments)
    if value is _MISSING or value is None:
        raise EntityNotFoundException(entity="Path", identifier=_join(segments))
    return copy.deepcopy(value)


def set_if_absent(document: Dict[str, Any], segments: List[str], value: Any) -> bool:
    if has_value(document, segments):
        return False
    parent = _parent(document, segments, create=True)
    parent[segments[-1]] = copy.deepcopy(value)
    return True


def append(document: Dict[str, Any], segments: List[str], item: Any) -> None:
    _list(document, segments, create=True).append(copy.deepcopy(item))


def remove_at(document: Dict[str, Any], segments: List[str], index: int) -> Any:
    items = _list(document, segments)
    if not 0 <= index < len(items):
        raise InvalidOperationException(
            operation="remove_at",
            reason=f"Index {index} out of range for '{_join(segments)}' ({len(items)} items)",
        )
    return items.pop(index)


def increment(document: Dict[str, Any], segments: List[str], amount: int, initial: int) -> int:
    parent = _parent(document, segments)
    current = parent.get(segments[-1])
    if current is None:
        current = initial
    if isinstance(current, bool) or not isinstance(current, int):
        raise InvalidOperationException(
            operation="increment", reason=f"Value at '{_join(segments)}' is not an integer"
        )
    parent[segments[-1]] = current + amount
    return current + amount


def move(
    document: Dict[str, Any],
    source: List[str],
    target: List[str],
    match: Callable[[Any], bool],
) -> Optional[Any]:
    items = _list(document, source)
    for index, item in enumerate(items):
        if match(item):
            destination = _list(document, target, create=True)
            moved = items.pop(index)
            destination.append(moved)
            return copy.deepcopy(moved)
    return None


def append_with_counter(
    document: Dict[str, Any],
    list_segments: List[str],
    counter_segments: List[str],
    build_item: Callable[[int], Any],
    amount: int,
    initial: int,
) -> Any:
    """
    自增计数器并把用新值构造的元素追加到列表

    构造或复制元素失败时文档保持不变。
    """
    counter_parent = _parent(document, counter_segments)
    current = counter_parent.get(counter_segments[-1])
    if current is None:
        current = initial
    if isinstance(current, bool) or not isinstance(current, int):
        raise InvalidOperationException(
            operation="append_with_counter",
            reason=f"Value at '{_join(counter_segments)}' is not an integer",
        )
    _parent(document, list_segments)

    value = current + amount
    item = copy.deepcopy(build_item(value))

    _list(document, list_segments, create=True).append(item)
    counter_parent[counter_segments[-1]] = value
    return copy.deepcopy(item)


def nest(prefix: List[str], value: Any) -> Dict[str, Any]:
    """把值放回以 prefix 为路径的嵌套文档中"""
    document: Dict[str, Any] = {}
    node = document
    for segment in prefix[:-1]:
        node[segment] = {}
        node = node[segment]
    node[prefix[-1]] = value
    return document


def extract(document: Dict[str, Any], prefix: List[str]) -> Optional[Any]:
    """取出 prefix 处的值，不存在时返回 None"""
    value = _lookup(document, prefix)
    return None if value is _MISSING else value
