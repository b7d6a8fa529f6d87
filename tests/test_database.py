"""Integration tests for the sqlite record store."""

import sqlite3
import threading
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from urlshortener.core.database import Database, to_timestamp
from urlshortener.core.exceptions import DuplicateKeyError, NotFoundError, StorageError
from urlshortener.models import UrlRecord

NOW = datetime(2025, 10, 15, 12, 0, tzinfo=timezone.utc)


def make_record(short_id, url="https://example.com", created_at=NOW):
    return UrlRecord(short_id=short_id, original_url=url, created_at=created_at)


class TestDatabase:
    """Tests for Database record operations."""

    def test_insert_and_find_by_short_id(self, test_db):
        test_db.insert(make_record("testcode", "https://example.com/a"))

        record = test_db.find_by_short_id("testcode")
        assert record is not None
        assert record.original_url == "https://example.com/a"
        assert record.clicks == 0
        assert record.created_at == NOW

    def test_find_missing(self, test_db):
        assert test_db.find_by_short_id("nonexistent") is None
        assert test_db.find_by_original_url("https://nowhere.example") is None

    def test_find_by_original_url(self, test_db):
        test_db.insert(make_record("code0001", "https://example.com/one"))
        test_db.insert(make_record("code0002", "https://example.com/two"))

        record = test_db.find_by_original_url("https://example.com/two")
        assert record.short_id == "code0002"

    def test_insert_duplicate_short_id(self, test_db):
        test_db.insert(make_record("dupcode1", "https://example.com/first"))

        with pytest.raises(DuplicateKeyError):
            test_db.insert(make_record("dupcode1", "https://example.com/second"))
        assert test_db.find_by_short_id("dupcode1").original_url == "https://example.com/first"

    def test_increment_clicks(self, test_db):
        test_db.insert(make_record("clicks01"))

        assert test_db.increment_clicks("clicks01").clicks == 1
        assert test_db.increment_clicks("clicks01").clicks == 2
        assert test_db.find_by_short_id("clicks01").clicks == 2

    def test_increment_clicks_missing(self, test_db):
        with pytest.raises(NotFoundError):
            test_db.increment_clicks("missing1")

    def test_list_all_newest_first(self, test_db):
        test_db.insert(make_record("aaaaaaaa", created_at=NOW - timedelta(minutes=2)))
        test_db.insert(make_record("bbbbbbbb", created_at=NOW - timedelta(minutes=1)))
        test_db.insert(make_record("cccccccc", created_at=NOW))

        assert [r.short_id for r in test_db.list_all()] == ["cccccccc", "bbbbbbbb", "aaaaaaaa"]

    def test_list_all_ties_broken_by_insertion_order(self, test_db):
        for short_id in ("first111", "second22", "third333"):
            test_db.insert(make_record(short_id))

        assert [r.short_id for r in test_db.list_all()] == ["third333", "second22", "first111"]

    def test_init_db_is_idempotent(self, test_db):
        test_db.insert(make_record("keepme11"))
        test_db.init_db()
        assert test_db.find_by_short_id("keepme11") is not None

    def test_close_is_idempotent(self):
        db = Database(":memory:")
        db.init_db()
        db.close()
        db.close()

    def test_file_database_persists(self, tmp_path):
        path = str(tmp_path / "urls.db")
        db = Database(path)
        db.init_db()
        db.insert(make_record("persist1"))
        db.close()

        reopened = Database(path)
        assert reopened.find_by_short_id("persist1") is not None
        reopened.close()

    def test_unreachable_database(self, tmp_path):
        db = Database(str(tmp_path / "missing" / "urls.db"))
        with pytest.raises(StorageError):
            db.init_db()

    def test_query_without_schema(self):
        db = Database(":memory:")
        with pytest.raises(StorageError):
            db.find_by_short_id("abcd1234")
        db.close()

    def test_failed_query_rolls_back(self):
        db = Database(":memory:")
        db._connection = MagicMock()
        db._connection.cursor.return_value.execute.side_effect = sqlite3.OperationalError("disk I/O error")

        with pytest.raises(StorageError):
            db.insert(make_record("rollback"))
        db._connection.rollback.assert_called_once_with()
        db._connection.commit.assert_not_called()

    def test_failed_increment_rolls_back(self):
        db = Database(":memory:")
        db._connection = MagicMock()
        db._connection.cursor.return_value.execute.side_effect = sqlite3.OperationalError("database is locked")

        with pytest.raises(StorageError):
            db.increment_clicks("abcd1234")
        db._connection.rollback.assert_called_once_with()
        db._connection.commit.assert_not_called()

    def test_store_usable_after_failed_write(self, test_db):
        test_db.insert(make_record("original"))
        with pytest.raises(DuplicateKeyError):
            test_db.insert(make_record("original", "https://example.com/other"))

        test_db.insert(make_record("nextone1"))
        assert test_db.increment_clicks("nextone1").clicks == 1

    def test_concurrent_increments_are_not_lost(self, tmp_path):
        path = str(tmp_path / "urls.db")
        setup = Database(path)
        setup.init_db()
        setup.insert(make_record("popular1"))
        setup.close()

        threads_count, clicks_per_thread = 8, 25
        errors = []

        def click():
            db = Database(path)
            try:
                for _ in range(clicks_per_thread):
                    db.increment_clicks("popular1")
            except StorageError as e:
                errors.append(e)
            finally:
                db.close()

        threads = [threading.Thread(target=click) for _ in range(threads_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        check = Database(path)
        assert check.find_by_short_id("popular1").clicks == threads_count * clicks_per_thread
        check.close()


class TestTimestamps:
    """Tests for stored timestamp formatting."""

    def test_naive_datetime_is_utc(self):
        assert to_timestamp(datetime(2025, 1, 1)) == "2025-01-01T00:00:00.000000+00:00"

    def test_aware_datetime_is_converted(self):
        value = datetime(2025, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_timestamp(value) == "2025-01-01T00:00:00.000000+00:00"
