"""
Ring Sizer CLI entry point.

Usage:
    python -m ringsizer                 # Launch the app
    python -m ringsizer --slider-right  # Dial on the right-hand side
    python -m ringsizer --help          # Show help
"""

import argparse
import logging
import sys
from pathlib import Path

from .core.config import Config


def setup_logging(config: Config) -> None:
    """Configure logging based on config."""
    log_config = config["logging"]
    level = getattr(logging, str(log_config.get("level", "INFO")).upper(), logging.INFO)
    if config.get("app.debug", False):
        level = logging.DEBUG

    log_file = log_config.get("file", "logs/ringsizer.log")
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=log_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ring Sizer - estimate ring size by finger width",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m ringsizer                   Launch the app
    python -m ringsizer --config ./conf   Use another configuration directory
    python -m ringsizer --slider-right    Start with the dial on the right
        """,
    )
    parser.add_argument("--config", type=str, help="Path to configuration directory")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument(
        "--slider-right", action="store_true", help="Place the dial right of the finger"
    )
    return parser


def apply_cli_overrides(config: Config, args: argparse.Namespace) -> None:
    """Apply command-line flags on top of the loaded configuration."""
    if args.slider_right:
        config.set("layout.slider_on_left", False)
    if args.debug:
        config.set("app.debug", True)
        config.set("logging.level", "DEBUG")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.config and not Path(args.config).is_dir():
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger(__name__).error(f"Configuration directory not found: {args.config}")
        return 1

    config = Config(Path(args.config) if args.config else None)
    apply_cli_overrides(config, args)

    setup_logging(config)

    logger = logging.getLogger(__name__)
    logger.info("Ring Sizer starting...")
    logger.info(f"Environment: {config.env}")

    # Kivy is imported lazily so --help works without a display
    from .mobile.app import run_mobile_app

    run_mobile_app(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
