"""Tests for growth logger"""

from strvec.core.growth_logger import GrowthEventKind, GrowthLogger, GrowthRecord
from strvec.core.strvec import StrVec


class TestGrowthLogger:
    """Test suite for GrowthLogger"""

    def test_initial_state(self):
        """Test a new logger is empty"""
        logger = GrowthLogger()
        assert logger.records == []
        summary = logger.get_summary()
        assert summary["total_events"] == 0
        assert summary["peak_capacity"] == 0

    def test_log_grow(self):
        """Test recording a reallocation"""
        logger = GrowthLogger()
        logger.log_grow(23, 24, 60)
        assert logger.records == [GrowthRecord(GrowthEventKind.GROW, 23, 24, 60)]

    def test_summary(self):
        """Test summary statistics"""
        logger = GrowthLogger()
        logger.log_grow(0, 0, 24)
        logger.log_grow(23, 24, 60)
        logger.log_clear(30, 60)
        logger.log_detach(1, 24)

        summary = logger.get_summary()
        assert summary["total_events"] == 4
        assert summary["total_reallocations"] == 2
        assert summary["peak_capacity"] == 60
        assert summary["slots_copied"] == 23
        assert summary["events_by_kind"][GrowthEventKind.CLEAR] == 1
        assert summary["events_by_kind"][GrowthEventKind.DETACH] == 1

    def test_print_summary(self):
        """Test formatted summary"""
        logger = GrowthLogger()
        logger.log_grow(0, 0, 24)
        text = logger.print_summary()
        assert "=== Growth Summary ===" in text
        assert "Reallocations: 1" in text
        assert "0 → 24 (count 0)" in text
        assert "grow: 1" in text

    def test_print_summary_empty(self):
        """Test formatted summary without events"""
        text = GrowthLogger().print_summary()
        assert "Reallocations: 0" in text
        assert "Events by kind" not in text

    def test_clear(self):
        """Test clearing records"""
        logger = GrowthLogger()
        logger.log_grow(0, 0, 24)
        logger.clear()
        assert logger.records == []


class TestGrowthLoggerWithStrVec:
    """Test events reported by StrVec"""

    def test_clear_and_detach_events(self):
        """Test clear and detach are logged"""
        logger = GrowthLogger()
        vec = StrVec(logger=logger)
        vec.pushl("a", "b")
        vec.clear()
        vec.push("c")
        vec.detach()

        kinds = [r.kind for r in logger.records]
        assert kinds == [
            GrowthEventKind.GROW,
            GrowthEventKind.CLEAR,
            GrowthEventKind.GROW,
            GrowthEventKind.DETACH,
        ]
        assert logger.records[1].count == 2

    def test_empty_operations_not_logged(self):
        """Test operations on the shared empty array log nothing"""
        logger = GrowthLogger()
        vec = StrVec(logger=logger)
        vec.clear()
        vec.detach()
        vec.pop()
        vec.split("   ")
        assert logger.records == []
