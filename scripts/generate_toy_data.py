#!/usr/bin/env python3
"""
生成 toy 数据：shopping_trends.csv（列顺序与原始购物趋势数据集一致）
"""
import argparse
import csv
import os

HEADER = [
    "Customer ID", "Age", "Gender", "Item Purchased", "Category", "Purchase Amount (USD)",
    "Location", "Size", "Color", "Season", "Review Rating", "Subscription Status",
    "Shipping Type", "Discount Applied", "Promo Code Used", "Previous Purchases",
    "Payment Method", "Preferred Payment Method", "Frequency of Purchases",
]

# item, category, season
PURCHASES = [
    ("T-shirt", "Clothing", "Summer"),
    ("Jeans", "Clothing", "Winter"),
    ("Sunglasses", "Accessories", "Summer"),
    ("Sneakers", "Footwear", "Spring"),
    ("Sweater", "Clothing", "Winter"),
    ("Scarf", "Accessories", "Winter"),
    ("Sandals", "Footwear", "Summer"),
    ("T-shirt", "Clothing", "Spring"),
    ("Handbag", "Accessories", "Fall"),
    ("Jeans", "Clothing", "Fall"),
]


def build_rows():
    rows = []
    for idx, (item, category, season) in enumerate(PURCHASES, start=1):
        rows.append([
            idx, 20 + idx * 3, "Male" if idx % 2 else "Female", item, category, 20 + idx * 7,
            "Kentucky", "M", "Gray", season, "3.1", "Yes" if idx % 3 == 0 else "No",
            "Express", "No", "No", idx * 2, "Venmo", "PayPal", "Weekly",
        ])
    return rows


def main():
    parser = argparse.ArgumentParser(description="生成玩具购物数据")
    parser.add_argument("--out", default="data/raw/shopping_trends.csv")
    args = parser.parse_args()

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    with open(args.out, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        writer.writerows(build_rows())

    print(f"Toy data generated at {args.out}")


if __name__ == "__main__":
    main()
