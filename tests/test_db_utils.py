import unittest
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from fortunewheel.db.utils import as_utc, dt_iso, resolve_sqlite_url


class TestResolveSqliteUrl(unittest.TestCase):
    def test_other_urls_unchanged(self):
        for url in ("postgresql+psycopg://u:p@localhost/wheel", "sqlite:////abs/wheel.db"):
            with self.subTest(url=url):
                self.assertEqual(resolve_sqlite_url(url, Path("/tmp")), url)

    def test_relative_path_is_anchored_at_project_root(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            resolved = resolve_sqlite_url("sqlite:///./data/wheel.db", root)
            self.assertEqual(
                Path(resolved[len("sqlite:///"):]),
                (root / "data" / "wheel.db").resolve(),
            )


class TestDatetimeHelpers(unittest.TestCase):
    def test_naive_values_are_taken_as_utc(self):
        naive = datetime(2026, 3, 1, 8, 30)
        self.assertEqual(as_utc(naive), naive.replace(tzinfo=timezone.utc))

    def test_aware_values_are_converted(self):
        kyiv = timezone(timedelta(hours=2))
        value = datetime(2026, 3, 1, 10, 30, tzinfo=kyiv)
        self.assertEqual(dt_iso(value), "2026-03-01T08:30:00+00:00")
        self.assertIsNone(dt_iso(None))


if __name__ == "__main__":
    unittest.main()
