"""共购图上的度中心性：全局一份，按季节（segment）各一份。"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

import networkx as nx
import numpy as np

from src.graph.node_mapping import NodeMapping
from src.logger import get_logger
from src.pipeline.records import PurchaseRecord

logger = get_logger(__name__)


@dataclass
class SegmentScore:
    """某条记录在分段中的得分，连同产生它的节点一起保存。"""
    node: int
    item_id: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _ratio(degrees: Sequence[int], count: int) -> List[float]:
    # count - 1 may be 0 or negative; nan/inf/negative results are returned as-is.
    with np.errstate(divide="ignore", invalid="ignore"):
        values = np.asarray(degrees, dtype=np.float64) / np.float64(count - 1)
    return values.tolist()


def segment_labels(records: Sequence[PurchaseRecord]) -> List[str]:
    """按首次出现顺序列出所有不同的 segment。"""
    return list(dict.fromkeys(record.segment for record in records))


def segment_nodes(records: Sequence[PurchaseRecord], mapping: NodeMapping, label: str) -> List[int]:
    """筛出该 segment 的记录并映射为节点；保留原顺序与重复，映射缺失的记录跳过。"""
    nodes = []
    for record in records:
        if record.segment != label:
            continue
        node = mapping.get(record.item_id)
        if node is not None:
            nodes.append(node)
    return nodes


def degree_centrality(graph: nx.DiGraph) -> List[float]:
    """out_degree / (节点总数 - 1)，按节点编号顺序返回。"""
    degrees = [graph.out_degree(node) for node in graph.nodes()]
    return _ratio(degrees, graph.number_of_nodes())


def segment_degree_centrality(
    graph: nx.DiGraph, records: Sequence[PurchaseRecord], mapping: NodeMapping
) -> Dict[str, List[float]]:
    """每个 segment 的得分序列。

    分子是节点在完整图中的出度（不是分段子图），分母是该 segment 的记录数减一；
    同一物品重复购买会让记录数变大，从而整体拉低该 segment 的得分。
    """
    return {
        label: [entry.score for entry in entries]
        for label, entries in segment_node_scores(graph, records, mapping).items()
    }


def segment_node_scores(
    graph: nx.DiGraph, records: Sequence[PurchaseRecord], mapping: NodeMapping
) -> Dict[str, List[SegmentScore]]:
    """与 segment_degree_centrality 数值相同，但每个得分都带上对应节点。"""
    result: Dict[str, List[SegmentScore]] = {}
    for label in segment_labels(records):
        nodes = segment_nodes(records, mapping, label)
        scores = _ratio([graph.out_degree(node) for node in nodes], len(nodes))
        result[label] = [
            SegmentScore(node=node, item_id=mapping.item_for(node), score=score)
            for node, score in zip(nodes, scores)
        ]
        logger.debug("Segment %r: %d records scored", label, len(nodes))
    return result


class CentralityCalculator:
    """对一张已构建完成的共购图计算度中心性。"""

    def __init__(self, G: nx.DiGraph):
        # 图在构建后只读，多次查询共用同一引用。
        self.G = G

    def global_scores(self) -> List[float]:
        scores = degree_centrality(self.G)
        logger.info("Computed global degree centrality for %d nodes", len(scores))
        return scores

    def segment_scores(
        self, records: Sequence[PurchaseRecord], mapping: NodeMapping
    ) -> Dict[str, List[float]]:
        scores = segment_degree_centrality(self.G, records, mapping)
        logger.info("Computed segment degree centrality for %d segments", len(scores))
        return scores

    def segment_scores_with_nodes(
        self, records: Sequence[PurchaseRecord], mapping: NodeMapping
    ) -> Dict[str, List[SegmentScore]]:
        return segment_node_scores(self.G, records, mapping)


__all__ = [
    "CentralityCalculator",
    "SegmentScore",
    "degree_centrality",
    "segment_degree_centrality",
    "segment_labels",
    "segment_node_scores",
    "segment_nodes",
]
