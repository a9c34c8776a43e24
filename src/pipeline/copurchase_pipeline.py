"""共购图分析流水线。

流程：记录加载 → 构图 → 全局度中心性 → 分段度中心性 → 组装报告。
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from centrality_calculator import CentralityCalculator
from graph_builder import GraphBuilder, edge_pairs
from src.logger import get_logger
from src.pipeline.records import PurchaseRecord, load_records
from src.pipeline.report import (
    PAIRING_IDENTITY,
    CentralityReport,
    global_lines,
    segment_lines,
    validate_pairing,
)

logger = get_logger(__name__)


class CopurchasePipeline:
    """串联构图与中心性计算，输出可打印、可序列化的报告。"""

    def __init__(
        self,
        records: Sequence[PurchaseRecord],
        pairing: str = PAIRING_IDENTITY,
        precision: int = 4,
    ):
        self.records: List[PurchaseRecord] = list(records)
        self.pairing = validate_pairing(pairing)
        if not isinstance(precision, int) or isinstance(precision, bool) or precision <= 0:
            raise ValueError("precision 必须为正整数")
        self.precision = precision
        self.builder = GraphBuilder()

    @classmethod
    def from_csv(cls, path: Union[str, Path], **kwargs) -> "CopurchasePipeline":
        return cls(load_records(path), **kwargs)

    def run(self) -> CentralityReport:
        if not self.records:
            logger.warning("No purchase records given; the report will be empty")
        graph, mapping = self.builder.build(self.records)

        calculator = CentralityCalculator(graph)
        global_scores = calculator.global_scores()
        segment_scores = calculator.segment_scores_with_nodes(self.records, mapping)

        lines = global_lines(graph, mapping, global_scores, self.precision)
        lines += segment_lines(graph, mapping, segment_scores, self.pairing, self.precision)
        return CentralityReport(
            mapping=mapping.to_dict(),
            edges=edge_pairs(graph, mapping),
            global_scores=global_scores,
            segment_scores=segment_scores,
            pairing=self.pairing,
            lines=lines,
        )


__all__ = ["CopurchasePipeline"]
