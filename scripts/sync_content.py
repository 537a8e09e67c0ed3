#!/usr/bin/env python3
"""
Load the markdown collections into the database content backend.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from personal_site.config import get_config
from personal_site.errors import CollectionUnavailable
from personal_site.logger import setup_logger
from personal_site.storage import DatabaseManager, FileContentStore
from personal_site.storage.sync import sync_collections


def main() -> None:
    """Upsert markdown posts into the database."""
    import argparse

    parser = argparse.ArgumentParser(description="Sync markdown content into the database")
    parser.add_argument("--content-dir", help="Override the content directory")
    parser.add_argument(
        "--drop", action="store_true", help="Drop existing tables before syncing"
    )
    args = parser.parse_args()

    setup_logger()
    config = get_config()
    source = FileContentStore(args.content_dir or config.content.content_dir)

    with DatabaseManager(db_config=config.database) as db_manager:
        db_manager.init_db(drop_all=args.drop)
        try:
            stats = sync_collections(source, db_manager, config.content.collections)
        except CollectionUnavailable as e:
            print(f"Sync failed: {e}", file=sys.stderr)
            sys.exit(1)

    for name in stats.created:
        print(f"{name}: {stats.created[name]} created, {stats.updated[name]} updated")


if __name__ == "__main__":
    main()
