"""Spin the prize wheel from the command line or list past winners.

Usage::

    python scripts/spin.py spin --username Alice
    python scripts/spin.py results --user ali --page 2
    python scripts/spin.py refresh
"""

from __future__ import annotations

import argparse
import logging
import sys

from fortunewheel.db.engine import get_sessionmaker, make_engine
from fortunewheel.errors import CatalogError
from fortunewheel.models import Base
from fortunewheel.results import filter_results, list_results, paginate, time_since
from fortunewheel.sheets.api import SheetsClient
from fortunewheel.storage import SqlKeyValueStore
from fortunewheel.wheel import PrizeCatalogProvider, WeightedSelector
from fortunewheel.workflows import spin_wheel

logger = logging.getLogger("fortunewheel.cli")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    spin = sub.add_parser("spin", help="spin once and record the prize")
    spin.add_argument("--username", required=True)
    spin.add_argument("--normalize", action="store_true", default=None,
                      help="scale the draw to the total weight instead of 100")

    results = sub.add_parser("results", help="list recorded wins, newest first")
    results.add_argument("--user", default="")
    results.add_argument("--prize", default="")
    results.add_argument("--page", type=int, default=1)

    sub.add_parser("refresh", help="drop the cached prize list and refetch it")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
    )

    engine = make_engine()
    Base.metadata.create_all(engine)
    Session = get_sessionmaker(engine)

    try:
        with Session.begin() as session:
            provider = PrizeCatalogProvider(SheetsClient(), SqlKeyValueStore(session))

            if args.command == "refresh":
                provider.invalidate()
                catalog = provider.load()
                print(f"Loaded {catalog.total} prizes from the sheet")

            elif args.command == "spin":
                catalog = provider.load()
                outcome = spin_wheel(
                    session,
                    catalog,
                    args.username,
                    selector=WeightedSelector(normalize=args.normalize),
                )
                print(f"{outcome.result.username} won: {outcome.prize.text}")

            else:
                page = paginate(
                    filter_results(list_results(session), args.user, args.prize),
                    page=args.page,
                )
                if not page.items:
                    print("No results")
                for result in page.items:
                    print(
                        f"{result.username}\t{result.prize}\t"
                        f"{result.won_at:%Y-%m-%d %H:%M}\t{time_since(result.won_at)}"
                    )
                if page.page_count > 1:
                    print(f"Page {page.page} of {page.page_count}")
    except (CatalogError, ValueError) as e:
        logger.error(str(e))
        return 1
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
