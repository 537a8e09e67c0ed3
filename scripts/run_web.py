#!/usr/bin/env python3
"""
Run the personal site with the Flask development server.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from personal_site.config import reload_config
from personal_site.logger import setup_logger
from personal_site.web import create_app


def main() -> None:
    """Start the development server."""
    import argparse

    config = reload_config()

    parser = argparse.ArgumentParser(description="Run the personal site web server")
    parser.add_argument("--host", default=config.web.host, help="Bind address")
    parser.add_argument("--port", type=int, default=config.web.port, help="Bind port")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    setup_logger()
    app = create_app(config=config, debug=args.debug)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
