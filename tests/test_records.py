import pandas as pd
import pytest

from src.pipeline.copurchase_pipeline import CopurchasePipeline
from src.pipeline.records import RECORD_FIELDS, PurchaseRecord, load_records, records_from_frame

HEADER = ",".join(f"col{i}" for i in range(len(RECORD_FIELDS)))


def write_csv(tmp_path, lines, name="shopping_trends.csv"):
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_load_records_reads_columns_by_position(tmp_path):
    path = write_csv(tmp_path, [
        HEADER,
        "1,55,Male,Blouse,Clothing,53,Kentucky,L,Gray,Winter,3.1,Yes,Express,No,TRUE,14,Venmo,Cash,Fortnightly",
    ])
    [record] = load_records(path)
    assert record.item_id == "Blouse"
    assert record.category == "Clothing"
    assert record.segment == "Winter"
    assert record.customer_id == 1
    assert record.age == 55
    assert record.gender == "Male"
    assert record.purchase_amount == 53
    # not an integer literal: defaults to 0
    assert record.review_rating == 0
    assert record.subscription_status is True
    assert record.discount_applied is False
    assert record.promo_code_used is True
    assert record.previous_purchases == 14
    assert record.frequency_of_purchases == "Fortnightly"


def test_invalid_counts_default_to_zero(tmp_path):
    path = write_csv(tmp_path, [
        HEADER,
        "abc,-3,F,Hat,Accessories,,Ohio,M,Red,Fall,5,maybe,Standard,yes,no,x,Cash,Cash,Weekly",
    ])
    [record] = load_records(path)
    assert record.customer_id == 0
    assert record.age == 0
    assert record.purchase_amount == 0
    assert record.review_rating == 5
    assert record.subscription_status is False
    assert record.discount_applied is True
    assert record.previous_purchases == 0


def test_short_rows_are_skipped_and_order_is_kept(tmp_path):
    full = "2,30,Female,{item},Clothing,10,Ohio,S,Blue,Summer,4,No,Express,No,No,1,Cash,Cash,Weekly"
    path = write_csv(tmp_path, [
        HEADER,
        full.format(item="Jeans"),
        "3,40,Male,Hat",
        full.format(item="T-shirt"),
    ])
    records = load_records(path)
    assert [r.item_id for r in records] == ["Jeans", "T-shirt"]


def test_missing_trailing_columns_default_to_empty(tmp_path):
    path = write_csv(tmp_path, ["a,b,c,d,e,f,g,h,i,j", "1,20,M,Socks,Clothing,5,Utah,S,Black,Spring"])
    [record] = load_records(path)
    assert record.segment == "Spring"
    assert record.payment_method == ""
    assert record.previous_purchases == 0


def test_too_few_columns_raises(tmp_path):
    path = write_csv(tmp_path, ["a,b,c", "1,2,3"])
    with pytest.raises(ValueError):
        load_records(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(tmp_path / "nope.csv")


def test_empty_inputs_give_no_records(tmp_path):
    assert load_records(write_csv(tmp_path, [HEADER], name="header_only.csv")) == []
    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    assert load_records(empty) == []


def test_records_from_frame_accepts_in_memory_data():
    df = pd.DataFrame(
        [["7", "33", "Male", "Coat", "Outerwear", "99", "Iowa", "XL", "Tan", "Winter"]],
        dtype=str,
    )
    [record] = records_from_frame(df)
    assert record == PurchaseRecord(
        customer_id=7, age=33, gender="Male", item_id="Coat", category="Outerwear",
        purchase_amount=99, location="Iowa", size="XL", color="Tan", segment="Winter",
    )


def test_rows_with_wrong_field_count_never_reach_the_graph(tmp_path):
    full = "2,30,Female,{item},Clothing,10,Ohio,S,Blue,Summer,4,No,Express,No,No,1,Cash,Cash,Weekly"
    path = write_csv(tmp_path, [
        HEADER,
        full.format(item="Jeans"),
        "3,40,Male,Hat",
        full.format(item="Coat") + ",extra",
        "",
        full.format(item="T-shirt"),
    ])
    report = CopurchasePipeline.from_csv(path).run()
    assert report.mapping == {"Jeans": 0, "T-shirt": 1}
    assert report.global_scores == [1.0, 1.0]
    assert list(report.segment_scores) == ["Summer"]


@pytest.mark.parametrize(
    "value",
    [
        "99999999999999999999999",
        "9223372036854775808",
        "١٢",
        "+-5",
    ],
)
def test_unparseable_counts_default_to_zero(tmp_path, value):
    path = write_csv(tmp_path, [
        HEADER,
        f"{value},30,Female,Hat,Accessories,10,Ohio,S,Blue,Fall,4,No,Express,No,No,1,Cash,Cash,Weekly",
    ])
    [record] = load_records(path)
    assert record.customer_id == 0
    assert record.age == 30
    assert record.item_id == "Hat"


def test_largest_int64_count_is_kept(tmp_path):
    path = write_csv(tmp_path, [
        HEADER,
        "+0009223372036854775807,30,F,Hat,Accessories,10,Ohio,S,Blue,Fall,4,No,Express,No,No,1,Cash,Cash,Weekly",
    ])
    [record] = load_records(path)
    assert record.customer_id == 9223372036854775807
