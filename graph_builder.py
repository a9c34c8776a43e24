"""基于 NetworkX 从交易记录构建物品共购有向图的工具。"""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

import networkx as nx

from src.graph.node_mapping import NodeMapping
from src.logger import get_logger
from src.pipeline.records import PurchaseRecord

logger = get_logger(__name__)


def create_nodes(graph: nx.DiGraph, records: Sequence[PurchaseRecord]) -> NodeMapping:
    """按记录顺序为每个首次出现的 item_id 分配编号并加入图中。"""
    mapping = NodeMapping()
    for record in records:
        node, created = mapping.get_or_create(record.item_id)
        if created:
            graph.add_node(node)
    logger.debug("Created %d nodes from %d records", len(mapping), len(records))
    return mapping


def create_edges(graph: nx.DiGraph, records: Sequence[PurchaseRecord], mapping: NodeMapping) -> None:
    """同一品类下的不同物品两两连边（双向），不产生自环。

    结果与对全部记录做 N² 两两比较得到的边集完全一致：先按品类分桶，
    再在桶内对不同物品的有序对连边。
    """
    buckets: Dict[str, Dict[int, None]] = defaultdict(dict)
    for record in records:
        # dict keeps first-seen order and drops repeated purchases of the same item.
        buckets[record.category][mapping[record.item_id]] = None

    for nodes in buckets.values():
        members = list(nodes)
        for src in members:
            for dst in members:
                if src != dst:
                    # add_edge on an existing edge is a no-op in DiGraph.
                    graph.add_edge(src, dst)
    logger.debug("Connected %d category buckets", len(buckets))


class GraphBuilder:
    """把有序交易记录转换成 (共购图, 物品→节点映射)。"""

    def __init__(self):
        self.G = nx.DiGraph()
        self.mapping = NodeMapping()

    def build(self, records: Sequence[PurchaseRecord]) -> Tuple[nx.DiGraph, NodeMapping]:
        """构建新图；每次调用都从空图开始，编号计数器局部于本次构建。"""
        self.G = nx.DiGraph()
        self.mapping = create_nodes(self.G, records)
        create_edges(self.G, records, self.mapping)
        self.mapping.freeze()
        logger.info(
            "Built co-purchase graph: %d nodes, %d edges from %d records",
            self.G.number_of_nodes(),
            self.G.number_of_edges(),
            len(records),
        )
        return self.G, self.mapping

    def get_graph(self) -> nx.DiGraph:
        """返回最近一次构建的 NetworkX 图供下游使用。"""
        return self.G

    def get_mapping(self) -> NodeMapping:
        return self.mapping


def build_graph(records: Sequence[PurchaseRecord]) -> Tuple[nx.DiGraph, NodeMapping]:
    return GraphBuilder().build(records)


def edge_pairs(graph: nx.DiGraph, mapping: NodeMapping) -> List[Tuple[str, str]]:
    """把边集还原成 (item_id, item_id) 对，便于展示与比对。"""
    return [(mapping.item_for(u), mapping.item_for(v)) for u, v in graph.edges()]


__all__ = ["GraphBuilder", "build_graph", "create_nodes", "create_edges", "edge_pairs"]
