"""购物交易记录的数据类与 CSV 加载器。

列按位置读取，顺序与 shopping_trends.csv 一致；表头只读不用。
核心算法只关心 item_id / category / segment 三个字段，其余字段原样透传。
"""
from __future__ import annotations

import csv
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import numpy as np
import pandas as pd

from src.logger import get_logger

logger = get_logger(__name__)

# Positional layout of the source CSV.
RECORD_FIELDS = [
    "customer_id",
    "age",
    "gender",
    "item_id",
    "category",
    "purchase_amount",
    "location",
    "size",
    "color",
    "segment",
    "review_rating",
    "subscription_status",
    "shipping_type",
    "discount_applied",
    "promo_code_used",
    "previous_purchases",
    "payment_method",
    "preferred_payment_method",
    "frequency_of_purchases",
]
COUNT_FIELDS = ["customer_id", "age", "purchase_amount", "review_rating", "previous_purchases"]
FLAG_FIELDS = ["subscription_status", "discount_applied", "promo_code_used"]
TRUE_TOKENS = {"true", "yes"}
INT64_MAX_TEXT = str(np.iinfo(np.int64).max)

# Minimum number of columns needed to reach the segment (season) column.
MIN_COLUMNS = RECORD_FIELDS.index("segment") + 1


@dataclass(frozen=True)
class PurchaseRecord:
    """一行交易记录。"""
    customer_id: int = 0
    age: int = 0
    gender: str = ""
    item_id: str = ""
    category: str = ""
    purchase_amount: int = 0
    location: str = ""
    size: str = ""
    color: str = ""
    segment: str = ""
    review_rating: int = 0
    subscription_status: bool = False
    shipping_type: str = ""
    discount_applied: bool = False
    promo_code_used: bool = False
    previous_purchases: int = 0
    payment_method: str = ""
    preferred_payment_method: str = ""
    frequency_of_purchases: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce_counts(column: pd.Series) -> pd.Series:
    """非负整数字面量转 int，其余（小数、负数、空串、超出 int64 等）一律为 0。"""
    matched = column.str.fullmatch(r"\+?[0-9]+").fillna(False).astype(bool)
    digits = column.str.lstrip("+").str.lstrip("0")
    # Equal-length digit strings compare like the numbers they spell.
    fits = (digits.str.len() < len(INT64_MAX_TEXT)) | (
        (digits.str.len() == len(INT64_MAX_TEXT)) & (digits <= INT64_MAX_TEXT)
    )
    values = pd.to_numeric(digits.where(matched & fits & (digits != ""), "0"), errors="coerce")
    return values.fillna(0).astype("int64")


def _coerce_flags(column: pd.Series) -> pd.Series:
    return column.str.strip().str.lower().isin(TRUE_TOKENS)


def records_from_frame(df: pd.DataFrame) -> List[PurchaseRecord]:
    """把按位置排列的字符串 DataFrame 转成 PurchaseRecord 列表。"""
    if len(df.columns) < MIN_COLUMNS:
        raise ValueError(
            f"Expected at least {MIN_COLUMNS} columns (up to the season column), got {len(df.columns)}"
        )
    frame = df.iloc[:, : len(RECORD_FIELDS)].copy()
    frame.columns = RECORD_FIELDS[: len(frame.columns)]
    for name in RECORD_FIELDS[len(frame.columns):]:
        frame[name] = ""
    frame = frame.astype(str)

    for name in COUNT_FIELDS:
        frame[name] = _coerce_counts(frame[name])
    for name in FLAG_FIELDS:
        frame[name] = _coerce_flags(frame[name])

    return [PurchaseRecord(**row) for row in frame.to_dict(orient="records")]


def _read_rows(path: Path) -> Tuple[List[str], List[List[str]], int]:
    """按 csv 读取表头与数据行；字段数与表头不一致的行视为格式错误并跳过。"""
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            return [], [], 0
        rows: List[List[str]] = []
        skipped = 0
        for row in reader:
            if not row:
                continue
            if len(row) != len(header):
                skipped += 1
                continue
            rows.append(row)
    return header, rows, skipped


def load_records(path: Union[str, Path]) -> List[PurchaseRecord]:
    """读取交易 CSV；文件缺失抛 FileNotFoundError，列数不足抛 ValueError。"""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Purchase data not found at {path}. Run scripts/generate_toy_data.py first."
        )
    header, rows, skipped = _read_rows(path)
    if not header:
        logger.warning("Purchase data at %s is empty", path)
        return []
    if skipped:
        logger.warning("Skipped %d malformed rows in %s", skipped, path)

    df = pd.DataFrame(rows, columns=range(len(header)), dtype=str)
    records = records_from_frame(df)
    logger.info("Loaded %d purchase records from %s", len(records), path)
    return records


__all__ = ["PurchaseRecord", "RECORD_FIELDS", "load_records", "records_from_frame"]
