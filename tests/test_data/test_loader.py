"""
Tests for export file loading and date-range filtering.
"""
import pytest

from paircorr.data.loader import ExportLoader, filter_by_date_range, jalali_range_to_gregorian
from paircorr.shared.errors import FormatError, InvalidDateError
from paircorr.shared.types import RawPoint


class TestExportLoader:
    """Test ExportLoader."""

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ExportLoader(tmp_path / "missing.csv")

    def test_loads_file_with_bom(self, tmp_path):
        path = tmp_path / "export.csv"
        path.write_text("\ufeff<TICKER>,<DTYYYYMMDD>,<CLOSE>\nFoolad,20240102,11\nFoolad,20240101,10\n", encoding="utf-8")
        parsed = ExportLoader(path).load()
        assert parsed.name == "Foolad"
        assert [p.date for p in parsed.points] == ["20240101", "20240102"]

    def test_bad_header_raises_format_error(self, tmp_path):
        path = tmp_path / "export.csv"
        path.write_text("<TICKER>,<CLOSE>\nFoolad,10\n", encoding="utf-8")
        with pytest.raises(FormatError):
            ExportLoader(path).load()


class TestFilterByDateRange:
    """Test filter_by_date_range."""

    @pytest.fixture
    def points(self):
        return [RawPoint(date=f"202401{d:02d}", close=float(d)) for d in range(1, 11)]

    def test_open_range_keeps_everything(self, points):
        assert filter_by_date_range(points) == points

    def test_inclusive_bounds(self, points):
        kept = filter_by_date_range(points, "20240103", "20240105")
        assert [p.date for p in kept] == ["20240103", "20240104", "20240105"]

    def test_start_only(self, points):
        kept = filter_by_date_range(points, start="20240109")
        assert [p.date for p in kept] == ["20240109", "20240110"]


class TestJalaliRangeToGregorian:
    """Test jalali_range_to_gregorian."""

    def test_converts_bounds(self):
        assert jalali_range_to_gregorian("1403/01/01", None) == ("20240320", None)

    def test_open_bounds(self):
        assert jalali_range_to_gregorian() == (None, None)

    def test_invalid_bound_raises(self):
        with pytest.raises(InvalidDateError):
            jalali_range_to_gregorian("1403/13/01")
