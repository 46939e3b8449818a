"""Entry point: `python main.py` opens the background window, `python main.py serve` runs the tool hub."""

import argparse
import logging
import sys

import config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reaction-diffusion background and tool hub.")
    parser.add_argument("--config", help="name of a saved config in configs/")
    parser.add_argument("--log-level", default="INFO", help="logging level (default INFO)")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("run", help="open the reaction-diffusion window (default)")
    serve = sub.add_parser("serve", help="run the tool hub HTTP server")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=5000)
    serve.add_argument("--debug", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    path = config.get_config_path(args.config) if args.config else None
    cfg = config.load_config(path)

    if args.command == "serve":
        from hub import create_app

        hub_app = create_app(cfg)
        logging.getLogger(__name__).info("Tool hub running at http://%s:%d", args.host, args.port)
        hub_app.run(host=args.host, port=args.port, debug=args.debug)
        return 0

    import app

    return 0 if app.run(cfg) else 1


if __name__ == "__main__":
    sys.exit(main())
