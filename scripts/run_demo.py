#!/usr/bin/env python3
"""共购图度中心性分析的演示入口脚本。

流程：读取配置 → 加载交易记录 → 构图 → 全局/季节度中心性 → 打印并可选保存 JSON。
"""
import argparse
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict

import yaml

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.logger import configure_logging, get_logger
from src.pipeline.copurchase_pipeline import CopurchasePipeline
from src.pipeline.report import PAIRINGS, save_report

logger = get_logger(__name__)


def load_config(path: Path) -> Dict[str, Any]:
    """读取 YAML 配置文件，失败立即抛错以便快速定位问题。"""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def validate_config(config: Dict[str, Any]):
    """对关键字段做基本类型与数值校验，避免静默使用非法配置。"""

    if not isinstance(config, dict):
        raise ValueError("配置文件格式错误，应为字典结构")

    dataset_conf = config.get("dataset", {})
    report_conf = config.get("report", {})
    if not isinstance(dataset_conf, dict) or not isinstance(report_conf, dict):
        raise ValueError("dataset 与 report 必须是字典结构")

    if not isinstance(dataset_conf.get("path", ""), str):
        raise ValueError("dataset.path 必须是字符串路径")
    if not isinstance(dataset_conf.get("generate_if_missing", True), bool):
        raise ValueError("dataset.generate_if_missing 必须为布尔值")

    pairing = report_conf.get("pairing", "identity")
    if pairing not in PAIRINGS:
        raise ValueError(f"report.pairing 必须为 {', '.join(PAIRINGS)} 之一")
    precision = report_conf.get("precision", 4)
    if not isinstance(precision, int) or isinstance(precision, bool) or precision <= 0:
        raise ValueError("report.precision 必须为正整数")
    out_path = report_conf.get("out_path")
    if out_path is not None and not isinstance(out_path, str):
        raise ValueError("report.out_path 必须是字符串路径或留空")


def ensure_toy_data(data_path: Path):
    """检查并生成玩具数据集；缺失时自动调用生成脚本。"""
    if data_path.exists():
        return
    logger.info("toy data not found; generating via scripts/generate_toy_data.py ...")
    subprocess.run(
        [sys.executable, str(ROOT / "scripts" / "generate_toy_data.py"), "--out", str(data_path)],
        check=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run co-purchase degree centrality demo")
    parser.add_argument("--config", default="configs/demo.yaml", help="Path to demo YAML config")
    parser.add_argument("--data", default=None, help="Purchase CSV override")
    parser.add_argument("--pairing", choices=PAIRINGS, default=None, help="分段得分的展示配对方式")
    parser.add_argument("--out", default=None, help="JSON 报告输出路径覆盖")
    return parser


def main():
    configure_logging()
    args = build_parser().parse_args()

    config = load_config(Path(args.config))
    validate_config(config)

    dataset_conf = config.get("dataset", {})
    report_conf = config.get("report", {})

    data_path = Path(args.data or dataset_conf.get("path", "data/raw/shopping_trends.csv"))
    if dataset_conf.get("generate_if_missing", True):
        ensure_toy_data(data_path)

    pipeline = CopurchasePipeline.from_csv(
        data_path,
        pairing=args.pairing or report_conf.get("pairing", "identity"),
        precision=report_conf.get("precision", 4),
    )
    report = pipeline.run()
    for line in report.lines:
        print(line)

    out_path = args.out or report_conf.get("out_path")
    if out_path:
        save_report(report, out_path)


if __name__ == "__main__":
    main()
