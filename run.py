"""Run the InkMaster studio backend on Flask's development server."""
from __future__ import annotations

import argparse
import os

from inkmaster import create_app


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the studio dashboard API.")
    parser.add_argument("--host", default=os.environ.get("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", 5000)))
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with empty appointment, client and portfolio collections",
    )
    parser.add_argument(
        "--show-routes",
        action="store_true",
        help="Print the mounted routes before serving",
    )
    return parser.parse_args(argv)


def describe_routes(flask_app) -> list[str]:
    return [
        f"{rule.rule} {','.join(sorted(rule.methods - {'HEAD', 'OPTIONS'}))}"
        for rule in sorted(flask_app.url_map.iter_rules(), key=lambda r: r.rule)
    ]


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    flask_app = create_app({"SEED_DEMO_DATA": False} if args.no_seed else None)

    if args.show_routes:
        for line in describe_routes(flask_app):
            print(line)

    debug_enabled = os.environ.get("FLASK_DEBUG", "0") in {"1", "true", "True"}
    flask_app.logger.info("Serving %s on %s:%s", flask_app.config["STUDIO_NAME"], args.host, args.port)
    flask_app.run(host=args.host, port=args.port, debug=debug_enabled)


if __name__ == "__main__":
    main()
