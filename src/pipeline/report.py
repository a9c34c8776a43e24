"""中心性结果的展示层：把节点编号还原成物品标识并输出文本或 JSON。

分段得分有两种配对方式：
- identity：每个得分对应产生它的那个物品（默认）。
- positional：按完整图节点遍历顺序与得分序列逐位 zip，较短者截断，
  与历史输出逐字一致，但得分和物品可能错位。
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import networkx as nx

from centrality_calculator import SegmentScore
from src.graph.node_mapping import NodeMapping
from src.logger import get_logger

logger = get_logger(__name__)

PAIRING_IDENTITY = "identity"
PAIRING_POSITIONAL = "positional"
PAIRINGS = (PAIRING_IDENTITY, PAIRING_POSITIONAL)


def _fmt(score: float, precision: int) -> str:
    return f"{score:.{precision}f}"


def validate_pairing(pairing: str) -> str:
    if pairing not in PAIRINGS:
        raise ValueError(f"Unknown pairing '{pairing}'. Use one of: {', '.join(PAIRINGS)}")
    return pairing


def global_lines(
    graph: nx.DiGraph, mapping: NodeMapping, scores: Sequence[float], precision: int = 4
) -> List[str]:
    lines = []
    for node in graph.nodes():
        item_id = mapping.item_for(node)
        if item_id is None:
            continue
        lines.append(f"Item '{item_id}': Degree Centrality: {_fmt(scores[node], precision)}")
    return lines


def paired_segment_scores(
    graph: nx.DiGraph,
    mapping: NodeMapping,
    entries: Sequence[SegmentScore],
    pairing: str = PAIRING_IDENTITY,
) -> List[Tuple[str, float]]:
    """返回某个 segment 用于展示的 (item_id, score) 序列。"""
    validate_pairing(pairing)
    if pairing == PAIRING_IDENTITY:
        return [(entry.item_id, entry.score) for entry in entries]
    pairs = []
    for node, entry in zip(graph.nodes(), entries):
        item_id = mapping.item_for(node)
        if item_id is not None:
            pairs.append((item_id, entry.score))
    return pairs


def segment_lines(
    graph: nx.DiGraph,
    mapping: NodeMapping,
    segment_scores: Dict[str, List[SegmentScore]],
    pairing: str = PAIRING_IDENTITY,
    precision: int = 4,
) -> List[str]:
    lines = []
    for label, entries in segment_scores.items():
        lines.append(f"Season {label}:")
        for item_id, score in paired_segment_scores(graph, mapping, entries, pairing):
            lines.append(f"  Item '{item_id}': Seasonal Degree Centrality: {_fmt(score, precision)}")
    return lines


@dataclass
class CentralityReport:
    """一次运行的完整输出：映射、边集、全局得分、分段得分。"""
    mapping: Dict[str, int]
    edges: List[Tuple[str, str]]
    global_scores: List[float]
    segment_scores: Dict[str, List[SegmentScore]]
    pairing: str = PAIRING_IDENTITY
    lines: List[str] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.mapping)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def segment_values(self) -> Dict[str, List[float]]:
        return {label: [e.score for e in entries] for label, entries in self.segment_scores.items()}

    def to_dict(self) -> Dict[str, Any]:
        items = sorted(self.mapping, key=self.mapping.get)
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "pairing": self.pairing,
            "mapping": dict(self.mapping),
            "edges": [list(edge) for edge in self.edges],
            "global_centrality": {item: self.global_scores[self.mapping[item]] for item in items},
            "segment_centrality": {
                label: [entry.to_dict() for entry in entries]
                for label, entries in self.segment_scores.items()
            },
        }


def save_report(report: CentralityReport, out_path: str) -> None:
    """保存为 JSON；退化得分按 Python json 的 NaN/Infinity 写出。"""
    Path(os.path.dirname(out_path) or ".").mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)
    logger.info("Saved centrality report to %s", out_path)


__all__ = [
    "CentralityReport",
    "PAIRINGS",
    "PAIRING_IDENTITY",
    "PAIRING_POSITIONAL",
    "global_lines",
    "paired_segment_scores",
    "save_report",
    "segment_lines",
    "validate_pairing",
]
