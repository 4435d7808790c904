"""记录分组工具

把一组记录按标签分组，返回按标签升序排列的有序字典。

示例::

    >>> group_by([{"name": "Steve", "team": "blue"},
    ...           {"name": "Jack", "team": "red"},
    ...           {"name": "Carol", "team": "blue"}], "team")
    {'blue': [{'name': 'Steve', 'team': 'blue'}, {'name': 'Carol', 'team': 'blue'}],
     'red': [{'name': 'Jack', 'team': 'red'}]}
"""

import logging
from collections.abc import Mapping
from numbers import Real
from typing import Any, Callable, Dict, Hashable, Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)

Record = Any
Label = Hashable
Selector = Union[str, Callable[[Record], Label]]


def resolve_selector(selector: Selector) -> Callable[[Record], Label]:
    """把选择器统一转换为 ``record -> label`` 函数

    可调用对象原样返回；其他值视为字段名。
    字段缺失时标签为 None，而不是抛出异常。
    """
    if callable(selector):
        return selector

    field = selector

    def select_field(record: Record) -> Label:
        if isinstance(record, Mapping):
            return record.get(field)
        return getattr(record, field, None)

    return select_field


def label_sort_key(label: Label) -> Tuple[int, Any]:
    """标签的排序键

    混合类型的标签按以下全序排列：
    数字（按数值，含布尔值）< 字符串（按字典序）< 其他值（按 str()）< None
    布尔值与数字同级：True == 1 且哈希相同，在字典中本就是同一个键。
    """
    if label is None:
        return (3, "")
    if isinstance(label, Real):
        return (0, label)
    if isinstance(label, str):
        return (1, label)
    return (2, str(label))


def group_by(
    records: Iterable[Record], selector: Selector
) -> Dict[Label, List[Record]]:
    """按选择器对记录分组

    Args:
        records: 待分组的记录序列，可以为空
        selector: 字段名，或接收一条记录并返回标签的函数

    Returns:
        Dict[Label, List[Record]]: 以标签为键、按 label_sort_key 升序排列的字典，
        每组内保持记录的输入顺序

    Raises:
        选择器抛出的任何异常都原样向上传播，不返回部分结果
    """
    select = resolve_selector(selector)

    grouped: Dict[Label, List[Record]] = {}
    for record in records:
        label = select(record)
        if label not in grouped:
            grouped[label] = []
        grouped[label].append(record)

    result = {label: grouped[label] for label in sorted(grouped, key=label_sort_key)}
    logger.debug(
        f"Grouped {sum(len(v) for v in result.values())} records into {len(result)} groups"
    )
    return result


def group_by_field(records: Iterable[Record], field: str) -> Dict[Label, List[Record]]:
    """按字段名分组，等价于 ``group_by(records, lambda r: r.get(field))``"""
    return group_by(records, resolve_selector(field))


__all__ = [
    "Record",
    "Label",
    "Selector",
    "resolve_selector",
    "label_sort_key",
    "group_by",
    "group_by_field",
]
