"""Seed and reset the demo catalog from the command line.

Usage:
    # Populate the demo catalog (no-op if data already exists)
    python -m catalog_api.scripts.seed seed

    # Delete all catalog data and populate again
    python -m catalog_api.scripts.seed reseed

    # Show row counts
    python -m catalog_api.scripts.seed stats
"""

import sys

from catalog_api.models.database import create_tables, get_db
from catalog_api.services import seed_service


def print_stats(stats: dict[str, int]) -> None:
    """Print row counts per table."""
    for table, count in stats.items():
        print(f"  {table.replace('_', ' ').title()}: {count}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(__doc__)
        return 1

    command = argv[0]
    if command not in ("seed", "reseed", "stats"):
        print(f"Unknown command: {command}")
        print(__doc__)
        return 1

    create_tables()
    db = next(get_db())

    try:
        if command == "seed":
            if seed_service.seed(db):
                print("Seeded demo catalog")
            else:
                print("Catalog already contains data, nothing seeded")
        elif command == "reseed":
            seed_service.reseed(db)
            print("Reseeded demo catalog")

        print_stats(seed_service.catalog_stats(db))
        return 0

    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
