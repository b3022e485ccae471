"""Flask server for the FloraSense diagnosis API"""

import argparse
import sys

from florasense import create_app
from florasense.config import load_config
from florasense.domain.exceptions import ConfigurationError


def main(argv: list[str] | None = None) -> int:
    config = load_config()

    parser = argparse.ArgumentParser(description="Run the FloraSense plant diagnosis server")
    parser.add_argument("--host", default=config.host, help=f"Bind address (default: {config.host})")
    parser.add_argument("--port", type=int, default=config.port, help=f"Port (default: {config.port})")
    parser.add_argument("--seed", type=int, default=config.training_seed, help="Training seed for reproducible models")
    parser.add_argument("--debug", action="store_true", default=config.DEBUG, help="Enable debug logging")
    args = parser.parse_args(argv)

    try:
        app = create_app({"training_seed": args.seed, "DEBUG": args.debug})
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    print(f"Server starting on http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop\n")

    try:
        app.run(host=args.host, port=args.port, debug=False, use_reloader=False)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
