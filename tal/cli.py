"""
Command line lookup of the page strategy elements for a device.

Usage:
    python -m tal generic-tv1 --config-path ./config --strategy-path ./pagestrategy
"""

import argparse
import json
import sys
from dataclasses import asdict

from tal import config
from tal.core.device_facade import DeviceFacade
from tal.core.errors import DeserializationError
from tal.strategies.resolver import StrategyResolver
from tal.strategies.store import FilesystemPageStrategyStore, PAGE_STRATEGY_ELEMENTS
from tal.utils.logging import get_logger

logger = get_logger("tal.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve TAL page strategy elements for a device")
    parser.add_argument("key", help="Device identifier, typically brand-model")
    parser.add_argument("--config-path", default=config.TAL_CONFIG_PATH, help="Device configuration root")
    parser.add_argument("--sub-dir", default=config.TAL_DEVICE_SUBDIR, help="Sub-directory holding device configurations")
    parser.add_argument("--strategy-path", default=config.TAL_PAGE_STRATEGY_PATH, help="Page strategy root")
    parser.add_argument("--default-strategy", default=config.TAL_DEFAULT_PAGE_STRATEGY, help="Fallback page strategy")
    parser.add_argument("--element", choices=PAGE_STRATEGY_ELEMENTS, help="Print a single element only")
    parser.add_argument("--json", action="store_true", help="Print all elements as JSON")
    return parser


def main(argv=None) -> int:
    """Main function for the command line lookup."""
    args = build_parser().parse_args(argv)

    store = FilesystemPageStrategyStore(args.strategy_path)
    resolver = StrategyResolver(store, default_strategy=args.default_strategy)
    framework = DeviceFacade(args.config_path, resolver=resolver)

    try:
        device = framework.load_config(args.key, args.sub_dir)
    except (OSError, DeserializationError) as e:
        logger.error("Could not load device configuration", key=args.key, error=str(e))
        return 1

    if args.element:
        print(resolver.resolve(device.page_strategy, args.element))
        return 0

    elements = framework.get_page_elements(device)
    if args.json:
        print(json.dumps(asdict(elements), indent=2))
    else:
        for name, value in asdict(elements).items():
            print(f"{name}: {value.strip()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
