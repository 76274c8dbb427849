import unittest

from fastapi.testclient import TestClient

from artcheck.app import create_app
from artcheck.config import Settings
from artcheck.db import SqlTableStorage, build_engine
from artcheck.storage import StorageError


class SqlTableStorageTests(unittest.TestCase):
    """
    Uses SQLite via SQLAlchemy URL for fast/local testing of the table client.
    """

    def setUp(self):
        self.engine = build_engine("sqlite+pysqlite:///:memory:")
        self.users = SqlTableStorage(self.engine, "users")
        self.cases = SqlTableStorage(self.engine, "cases")

    def tearDown(self):
        self.engine.dispose()

    def test_read_all_empty(self):
        self.assertEqual(self.users.read_all(), [])

    def test_insert_and_find(self):
        row = self.users.insert(
            {"id": "u1", "email": "ana@x.com", "password": "p", "name": "Ana"}
        )
        self.assertEqual(row["id"], "u1")
        self.assertFalse(row["admin"])
        self.assertNotIn("seq", row)

        fetched = self.users.find_by_id("u1")
        self.assertEqual(fetched, row)
        self.assertIsNone(self.users.find_by_id("nope"))

    def test_insert_ignores_unknown_columns(self):
        row = self.users.insert({"id": "u1", "email": "a@x.com", "shoe_size": 42})
        self.assertNotIn("shoe_size", row)

    def test_read_all_keeps_insertion_order(self):
        for user_id in ("c", "a", "b"):
            self.users.insert({"id": user_id})
        self.assertEqual([row["id"] for row in self.users.read_all()], ["c", "a", "b"])

    def test_duplicate_id_raises(self):
        self.users.insert({"id": "u1"})
        with self.assertRaises(StorageError):
            self.users.insert({"id": "u1"})

    def test_delete_by_id(self):
        self.users.insert({"id": "u1", "email": "ana@x.com"})
        removed = self.users.delete_by_id("u1")
        self.assertEqual(removed["email"], "ana@x.com")
        self.assertIsNone(self.users.delete_by_id("u1"))
        self.assertEqual(self.users.read_all(), [])

    def test_case_json_columns(self):
        self.cases.insert(
            {
                "id": "c1",
                "user_id": "u1",
                "title": "Label",
                "score": 0.8,
                "raw": {"checks": [1, 2]},
                "time_stamps": {"created": "2025-01-01"},
            }
        )
        row = self.cases.find_by_id("c1")
        self.assertEqual(row["raw"], {"checks": [1, 2]})
        self.assertEqual(row["time_stamps"], {"created": "2025-01-01"})
        self.assertEqual(row["score"], 0.8)

    def test_read_all_reports_driver_errors_as_none(self):
        self.users.insert({"id": "u1"})
        with self.engine.begin() as conn:
            conn.exec_driver_sql("DROP TABLE users")
        self.assertIsNone(self.users.read_all())
        with self.assertRaises(StorageError):
            self.users.find_by_id("u1")
        with self.assertRaises(StorageError):
            self.users.insert({"id": "u2"})

    def test_unknown_table(self):
        with self.assertRaises(ValueError):
            SqlTableStorage(self.engine, "invoices")


class DatabaseBackendApiTests(unittest.TestCase):
    def setUp(self):
        settings = Settings(
            storage_backend="database", database_url="sqlite+pysqlite:///:memory:"
        )
        self.client = TestClient(create_app(settings))

    def test_user_lifecycle(self):
        created = self.client.post(
            "/api/users",
            json={"user": {"name": "Ana", "email": "ana@x.com", "password": "p"}},
        )
        self.assertEqual(created.status_code, 200)
        user = created.json()["payload"]

        listed = self.client.get("/api/users").json()["payload"]
        self.assertEqual([u["id"] for u in listed], [user["id"]])

        self.assertEqual(self.client.get(f"/api/users/{user['id']}").json()["payload"], user)
        self.assertEqual(self.client.delete(f"/api/users/{user['id']}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/users/{user['id']}").status_code, 404)

    def test_failed_select_answers_not_found(self):
        storage = self.client.app.state.container.user_service.repository.storage
        with storage.engine.begin() as conn:
            conn.exec_driver_sql("DROP TABLE users")
        response = self.client.get("/api/users")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response.json(),
            {"ok": False, "message": "No users available", "payload": None},
        )

    def test_missing_database_url(self):
        with self.assertRaises(ValueError):
            create_app(Settings(storage_backend="database", database_url=None))


if __name__ == "__main__":
    unittest.main()
