import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from fortunewheel.models import Base, CacheEntry
from fortunewheel.storage import KeyValueStore, MemoryStore, SqlKeyValueStore
from fortunewheel.wheel import PrizeCatalogProvider


class _StaticClient:
    def __init__(self):
        self.calls = 0

    def get_values(self, cell_range, *, sheet_id=None, api_key=None):
        self.calls += 1
        return {"values": [["Mug", "#000", "60"], ["Pen", "#111", "40"]]}


class MemoryStoreTests(unittest.TestCase):
    def test_get_set(self):
        store = MemoryStore({"a": "1"})
        self.assertEqual(store.get("a"), "1")
        self.assertIsNone(store.get("b"))
        store.set("a", "2")
        self.assertEqual(store.get("a"), "2")
        self.assertIsInstance(store, KeyValueStore)

    def test_rejects_non_string_values(self):
        with self.assertRaises(TypeError):
            MemoryStore().set("a", 1)  # type: ignore[arg-type]


class SqlKeyValueStoreTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(
            bind=self.engine, future=True, expire_on_commit=False
        )

    def tearDown(self):
        self.engine.dispose()

    def test_set_inserts_then_updates(self):
        with self.Session.begin() as session:
            store = SqlKeyValueStore(session)
            self.assertIsNone(store.get("wheelPrizes"))
            store.set("wheelPrizes", "[]")
            store.set("wheelPrizes", "[1]")
            self.assertEqual(store.get("wheelPrizes"), "[1]")

        with self.Session() as session:
            entries = session.query(CacheEntry).all()
            self.assertEqual(len(entries), 1)
            self.assertEqual(entries[0].value, "[1]")
            self.assertIsNotNone(entries[0].updated_at)

    def test_catalog_cache_survives_sessions(self):
        client = _StaticClient()
        with self.Session.begin() as session:
            first = PrizeCatalogProvider(client, SqlKeyValueStore(session)).load()

        with self.Session() as session:
            second = PrizeCatalogProvider(client, SqlKeyValueStore(session)).load()

        self.assertEqual(client.calls, 1)
        self.assertEqual(first.source, "remote")
        self.assertEqual(second.source, "cache")
        self.assertEqual(second.prizes, first.prizes)


if __name__ == "__main__":
    unittest.main()
