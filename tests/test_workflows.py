from __future__ import annotations

import unittest
from datetime import datetime, timezone

from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from fortunewheel.models import Base, SpinResult
from fortunewheel.wheel import Prize, PrizeCatalog, WeightedSelector
from fortunewheel.workflows import spin_wheel

CATALOG = PrizeCatalog(
    prizes=(
        Prize("Coffee", "#6F4E37", 30.0),
        Prize("Mug", "#FF0000", 30.0),
        Prize("Pen", "#00FF00", 40.0),
    ),
    total=3,
    source="remote",
)


class SpinWorkflowTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(
            bind=self.engine, future=True, expire_on_commit=False
        )

    def tearDown(self) -> None:
        self.engine.dispose()

    def test_spin_selects_rotates_and_records(self) -> None:
        now = datetime(2026, 1, 2, 3, 4, tzinfo=timezone.utc)
        selector = WeightedSelector(lambda: 0.45, normalize=False)
        with self.Session.begin() as session:
            outcome = spin_wheel(session, CATALOG, " Nadia ", selector=selector, now=now)

        self.assertEqual(outcome.index, 1)
        self.assertEqual(outcome.prize.text, "Mug")
        # 3 sections of 120 degrees, section 1 centered at 180
        self.assertEqual(outcome.rotation, 5 * 360 + 180.0)
        self.assertEqual(outcome.result.username, "Nadia")
        self.assertEqual(outcome.result.prize, "Mug")

        with self.Session() as session:
            stored = session.scalars(select(SpinResult)).all()
        self.assertEqual(len(stored), 1)
        self.assertEqual(stored[0].prize, "Mug")

    def test_rotation_continues_from_current_position(self) -> None:
        selector = WeightedSelector(lambda: 0.99, normalize=False)
        with self.Session.begin() as session:
            outcome = spin_wheel(
                session, CATALOG, "Ann", selector=selector, current_rotation=1980.0
            )
        self.assertEqual(outcome.index, 2)
        self.assertGreater(outcome.rotation, 1980.0)
        self.assertEqual(outcome.rotation % 360, 60.0)

    def test_rejects_blank_username(self) -> None:
        with self.Session() as session:
            with self.assertRaises(ValueError):
                spin_wheel(session, CATALOG, "  ")
            self.assertEqual(session.scalars(select(SpinResult)).all(), [])

    def test_rejects_empty_catalog(self) -> None:
        empty = PrizeCatalog(prizes=(), total=0, source="cache")
        with self.Session() as session:
            with self.assertRaises(ValueError):
                spin_wheel(session, empty, "Ann")


if __name__ == "__main__":
    unittest.main()
