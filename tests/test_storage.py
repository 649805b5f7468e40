import sqlite3

import pytest

from blog_api.app.core.db import Storage
from blog_api.app.core.errors import IntegrityFailure, StorageFailure


def test_open_creates_file_and_tables(db_path):
    storage = Storage(db_path)
    storage.open()
    try:
        assert storage.is_open
        conn = sqlite3.connect(db_path)
        names = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
        conn.close()
        assert {"users", "posts"} <= names
    finally:
        storage.close()
    assert not storage.is_open


def test_open_is_idempotent_and_keeps_data(db_path):
    storage = Storage(db_path)
    storage.open()
    storage.insert_user("a@example.com", "pw")
    storage.open()
    storage.close()

    reopened = Storage(db_path)
    reopened.open()
    try:
        assert reopened.find_user_by_email("a@example.com")["password"] == "pw"
    finally:
        reopened.close()


def test_find_user_returns_none_for_unknown_email(storage):
    assert storage.find_user_by_email("nobody@example.com") is None


def test_insert_user_assigns_increasing_ids(storage):
    first = storage.insert_user("a@example.com", "pw")
    second = storage.insert_user("b@example.com", "pw")
    assert second > first
    assert storage.find_user_by_email("b@example.com") == {
        "id": second,
        "email": "b@example.com",
        "password": "pw",
    }


def test_duplicate_email_is_an_integrity_failure(storage):
    storage.insert_user("a@example.com", "pw")
    with pytest.raises(IntegrityFailure):
        storage.insert_user("a@example.com", "other")
    assert storage.find_user_by_email("a@example.com")["password"] == "pw"


def test_posts_listed_by_id_descending(storage):
    ids = [storage.insert_post({"title": f"post {n}", "date": "2026-01-01T00:00:00.000Z"}) for n in range(3)]
    rows = storage.list_posts_descending()
    assert [row["id"] for row in rows] == list(reversed(ids))
    assert rows[0]["title"] == "post 2"
    assert rows[0]["image"] is None


def test_delete_post_reports_rows_removed(storage):
    post_id = storage.insert_post({"title": "t"})
    assert storage.delete_post(post_id) == 1
    assert storage.delete_post(post_id) == 0
    assert storage.list_posts_descending() == []


def test_operations_on_closed_storage_fail(db_path):
    storage = Storage(db_path)
    with pytest.raises(StorageFailure):
        storage.list_posts_descending()


def test_delete_post_with_textual_id(storage):
    post_id = storage.insert_post({"title": "t"})
    assert storage.delete_post("abc") == 0
    assert storage.delete_post(str(post_id)) == 1
