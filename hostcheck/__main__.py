"""Entry point — python -m hostcheck."""

from __future__ import annotations

import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hostcheck",
        description="Local host health report (system, CPU, memory, volumes, disks)",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration YAML file",
        default=None,
    )
    parser.add_argument(
        "-o", "--output",
        help="Report file path (default: HostHealth_<timestamp> in the output directory)",
        default=None,
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the machine-readable JSON report instead of HTML",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the terminal summary",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from hostcheck.app import Application
    from hostcheck.host.models import HostcheckError

    try:
        app = Application(config_path=args.config)
        return app.run(
            output=args.output,
            fmt="json" if args.json else None,
            quiet=args.quiet,
            verbose=args.verbose,
        )
    except (HostcheckError, OSError, ValueError) as exc:
        print(f"hostcheck: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
