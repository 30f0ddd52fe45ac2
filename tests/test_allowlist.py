"""Tests for recordcheck.allowlist module."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from recordcheck.allowlist import AllowListChecker
from recordcheck.config import Config


class TestAllowListCheckerWithDatabase:
    def test_allowed_from_range(self, ranges_db):
        checker = AllowListChecker(Config(database_url=ranges_db))
        assert checker.check("192.168.1.5") is True
        checker.close()

    def test_allowed_from_cidr(self, ranges_db):
        checker = AllowListChecker(Config(database_url=ranges_db))
        assert checker.check("10.20.30.40") is True
        checker.close()

    def test_allowed_exact(self, ranges_db):
        checker = AllowListChecker(Config(database_url=ranges_db))
        assert checker.check("8.8.8.8") is True
        checker.close()

    def test_denied(self, ranges_db):
        checker = AllowListChecker(Config(database_url=ranges_db))
        assert checker.check("192.168.2.1") is False
        checker.close()

    def test_invalid_ip_denied(self, ranges_db):
        checker = AllowListChecker(Config(database_url=ranges_db))
        assert checker.check("999.1.1.1") is False
        checker.close()

    def test_database_error_fails_closed(self, ranges_db):
        checker = AllowListChecker(Config(database_url=ranges_db, ranges_table="missing"))
        assert checker.check("8.8.8.8") is False
        checker.close()


class TestAllowListCheckerExplicitRanges:
    @patch("recordcheck.allowlist.RangeSource")
    def test_explicit_ranges_skip_database(self, mock_source_cls):
        checker = AllowListChecker(Config(database_url="sqlite://"))
        assert checker.check("10.0.0.1", ranges=["10.0.0.0/8"]) is True
        mock_source_cls.assert_not_called()

    def test_explicit_empty_ranges_deny(self):
        checker = AllowListChecker(Config())
        assert checker.check("10.0.0.1", ranges=[]) is False

    def test_no_database_url_raises(self):
        checker = AllowListChecker(Config())
        with pytest.raises(ValueError, match="DATABASE_URL"):
            checker.check("10.0.0.1")


class TestAllowListCheckerSource:
    @patch("recordcheck.allowlist.RangeSource")
    def test_source_created_once_with_config(self, mock_source_cls):
        mock_source = MagicMock()
        mock_source.fetch_ranges.return_value = ["10.0.0.0/8"]
        mock_source_cls.return_value = mock_source

        checker = AllowListChecker(
            Config(database_url="mysql+pymysql://u:p@db/app", ranges_table="allowed")
        )
        checker.check("10.0.0.1")
        checker.check("10.0.0.2")

        mock_source_cls.assert_called_once_with("mysql+pymysql://u:p@db/app", table="allowed")
        assert mock_source.fetch_ranges.call_count == 2

    @patch("recordcheck.allowlist.RangeSource")
    def test_fetch_error_is_logged(self, mock_source_cls, caplog):
        mock_source = MagicMock()
        mock_source.fetch_ranges.side_effect = OperationalError("SELECT", {}, Exception("boom"))
        mock_source_cls.return_value = mock_source

        checker = AllowListChecker(Config(database_url="sqlite://"))
        assert checker.check("10.0.0.1") is False
        assert "Database error" in caplog.text

    @patch("recordcheck.allowlist.RangeSource")
    def test_close_disposes_source(self, mock_source_cls):
        checker = AllowListChecker(Config(database_url="sqlite://"))
        checker.check("10.0.0.1", ranges=None)
        checker.close()
        mock_source_cls.return_value.close.assert_called_once()

    def test_close_without_source_is_noop(self):
        AllowListChecker(Config()).close()
