import pytest

from src.pipeline.records import PurchaseRecord


def make_records(*rows):
    """rows: (item, category) or (item, category, season) tuples."""
    records = []
    for row in rows:
        item_id, category = row[0], row[1]
        segment = row[2] if len(row) > 2 else ""
        records.append(PurchaseRecord(item_id=item_id, category=category, segment=segment))
    return records


@pytest.fixture
def seasonal_records():
    return make_records(
        ("T-shirt", "Clothing", "Summer"),
        ("Jeans", "Clothing", "Winter"),
        ("Sunglasses", "Accessories", "Summer"),
    )
