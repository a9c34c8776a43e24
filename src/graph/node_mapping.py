"""物品标识与图节点编号之间的双向映射。"""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple


class MappingFrozenError(RuntimeError):
    """Raised when a new identifier is inserted after the mapping was frozen."""


class NodeMapping:
    """按首次出现顺序分配连续编号（0, 1, 2, ...）的 item_id → node 映射。

    正反两张表同步维护，保证一一对应；构图结束后调用 ``freeze`` 变为只读。
    """

    def __init__(self):
        self._forward: Dict[str, int] = {}
        self._reverse: List[str] = []
        self._frozen = False

    def get_or_create(self, item_id: str) -> Tuple[int, bool]:
        """返回 (node, created)；未见过的标识分配下一个编号。"""
        node = self._forward.get(item_id)
        if node is not None:
            return node, False
        if self._frozen:
            raise MappingFrozenError(f"Cannot add '{item_id}': node mapping is frozen")
        node = len(self._reverse)
        self._forward[item_id] = node
        self._reverse.append(item_id)
        return node, True

    def get(self, item_id: str) -> Optional[int]:
        return self._forward.get(item_id)

    def item_for(self, node: int) -> Optional[str]:
        """反查节点对应的物品标识，越界返回 None。"""
        if 0 <= node < len(self._reverse):
            return self._reverse[node]
        return None

    def freeze(self) -> "NodeMapping":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def items(self) -> Iterator[Tuple[str, int]]:
        """按编号顺序遍历 (item_id, node)。"""
        for node, item_id in enumerate(self._reverse):
            yield item_id, node

    def to_dict(self) -> Dict[str, int]:
        return dict(self._forward)

    def __getitem__(self, item_id: str) -> int:
        return self._forward[item_id]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._forward

    def __len__(self) -> int:
        return len(self._reverse)

    def __iter__(self) -> Iterator[str]:
        return iter(self._reverse)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"NodeMapping(size={len(self)}, {state})"


__all__ = ["NodeMapping", "MappingFrozenError"]
