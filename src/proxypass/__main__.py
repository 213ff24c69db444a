"""Entry point for ProxyPass."""

import logging
import sys

from .app import run_app
from .config import Config


def main() -> int:
    """Main entry point for ProxyPass."""
    try:
        # Load configuration
        config = Config.load()

        # The terminal belongs to the TUI, so log to a file
        logging.basicConfig(
            filename=config.get_log_path(),
            level=config.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        # Run the application
        run_app(config)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
