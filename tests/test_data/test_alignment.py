"""
Tests for date alignment (inner join).
"""
from paircorr.data.alignment import align_by_date, clean_date_key
from paircorr.shared.types import RawPoint


def _points(dates, start=100.0):
    return [RawPoint(date=d, close=start + i) for i, d in enumerate(dates)]


class TestCleanDateKey:
    """Test clean_date_key."""

    def test_plain_key_unchanged(self):
        assert clean_date_key("20240320") == "20240320"

    def test_dashes_removed(self):
        assert clean_date_key("2024-03-20") == "20240320"

    def test_iso_timestamp_truncated(self):
        assert clean_date_key("2024-03-20T00:00:00") == "20240320"


class TestAlignByDate:
    """Test align_by_date."""

    def test_inner_join(self):
        s1 = _points(["20240101", "20240102", "20240103", "20240104"])
        s2 = _points(["20240102", "20240104", "20240105"], start=50.0)
        merged = align_by_date(s1, s2)
        assert [m.date for m in merged] == ["20240102", "20240104"]
        assert merged[0].price1 == 101.0
        assert merged[0].price2 == 50.0
        assert merged[1].price2 == 51.0

    def test_length_bounded_and_dates_in_both(self):
        s1 = _points([f"202401{d:02d}" for d in range(1, 29, 2)])
        s2 = _points([f"202401{d:02d}" for d in range(1, 29, 3)])
        merged = align_by_date(s1, s2)
        assert len(merged) <= min(len(s1), len(s2))
        dates1 = {p.date for p in s1}
        dates2 = {p.date for p in s2}
        assert all(m.date in dates1 and m.date in dates2 for m in merged)

    def test_follows_first_series_order(self):
        s1 = _points(["20240103", "20240101", "20240102"])
        s2 = _points(["20240101", "20240102", "20240103"])
        assert [m.date for m in align_by_date(s1, s2)] == ["20240103", "20240101", "20240102"]

    def test_mixed_date_formats_join(self):
        s1 = _points(["20240101", "20240102"])
        s2 = _points(["2024-01-01", "2024-01-02T00:00:00"])
        merged = align_by_date(s1, s2)
        assert [m.date for m in merged] == ["20240101", "20240102"]

    def test_empty_intersection(self):
        assert align_by_date(_points(["20240101"]), _points(["20240102"])) == []

    def test_empty_input(self):
        assert align_by_date([], _points(["20240101"])) == []
