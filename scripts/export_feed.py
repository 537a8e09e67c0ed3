#!/usr/bin/env python3
"""
Write the RSS feed to a file for static deployment.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from personal_site.config import get_config
from personal_site.core.feed_builder import create_feed_builder
from personal_site.errors import CollectionUnavailable
from personal_site.logger import setup_logger


def main() -> None:
    """Build the feed once and write it out."""
    import argparse

    parser = argparse.ArgumentParser(description="Export the site's RSS feed")
    parser.add_argument("--output", default="dist/rss.xml", help="Output file path")
    parser.add_argument("--content-dir", help="Override the content directory")
    args = parser.parse_args()

    setup_logger()
    config = get_config()
    if args.content_dir:
        config.content.content_dir = args.content_dir

    builder = create_feed_builder(config=config)
    try:
        document = builder.build_feed(config.site_metadata())
    except CollectionUnavailable as e:
        print(f"Feed export failed: {e}", file=sys.stderr)
        sys.exit(1)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(document.body)
    print(f"Wrote {document.item_count} items to {output}")


if __name__ == "__main__":
    main()
