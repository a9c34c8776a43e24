"""用于构图和度中心性计算的冒烟测试脚本。"""

from graph_builder import GraphBuilder
from centrality_calculator import CentralityCalculator
from src.pipeline.records import PurchaseRecord

# 模拟数据：两件同品类服装 + 一件配饰
records = [
    PurchaseRecord(item_id="T-shirt", category="Clothing", segment="Summer"),
    PurchaseRecord(item_id="Jeans", category="Clothing", segment="Winter"),
    PurchaseRecord(item_id="Sunglasses", category="Accessories", segment="Summer"),
]

# 构图：同品类物品双向连边
builder = GraphBuilder()
G, mapping = builder.build(records)
print(f"nodes={G.number_of_nodes()} edges={G.number_of_edges()}")

# 计算全局与季节度中心性
calculator = CentralityCalculator(G)
for item_id, score in zip(mapping, calculator.global_scores()):
    print(f"{item_id}: {score:.4f}")
for season, scores in calculator.segment_scores(records, mapping).items():
    print(season, scores)
