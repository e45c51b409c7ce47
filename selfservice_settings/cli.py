#!/usr/bin/env python3
"""
SelfService+ Settings CLI
=========================

Diagnostics for the layered settings: which sources are bound, what each
key resolves to and where the value came from, and whether a JSON
configuration file would be accepted.
"""

import json
import sys
from typing import List, Optional

import yaml

from .config.errors import SelfServicePlusSettingsError
from .config.keys import CATALOGUE, spec_for
from .config.resolver_settings import ResolverSettings
from .config.settings_manager import SelfServicePlusSettingsManager
from .config.value_types import ValueType
from .utils.logger import setup_logging


def _format(value) -> str:
    return json.dumps(value, default=str)


def print_status(manager: SelfServicePlusSettingsManager):
    """Print source availability."""
    print("\n=== Configuration Sources ===")
    for name, available in manager.source_availability().items():
        print(f"{name}: {'available' if available else 'unavailable'}")

    print(f"\nApp Group: {manager.settings.app_group_identifier}")
    print(f"App Group Container: {manager.settings.shared_container}")
    print(f"JSON Configuration: {manager.default_document_path()}")
    if manager.document_store.path:
        print(f"Loaded From: {manager.document_store.path}")


def print_settings(manager: SelfServicePlusSettingsManager):
    """Print every catalogue key with its resolved value and source."""
    print("\n=== Resolved Settings ===")
    width = max(len(key) for key in CATALOGUE)
    for key, spec in CATALOGUE.items():
        resolved = manager.resolve(key, spec.default_value(), spec.value_type)
        source = resolved.source or 'default'
        print(f"{key:<{width}}  {_format(resolved.value)}  [{source}]")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for command-line usage."""
    import argparse

    parser = argparse.ArgumentParser(description='SelfService+ Settings Diagnostics')
    parser.add_argument('--status', action='store_true', help='Show configuration source status')
    parser.add_argument('--show', action='store_true', help='Show all resolved settings')
    parser.add_argument('--get', metavar='KEY', help='Resolve a single key')
    parser.add_argument('--type', dest='value_type', help='Value type for --get '
                        '(bool, number, string, optional_string, string_list, record_list, any)')
    parser.add_argument('--describe', metavar='KEY', help='Describe a catalogue key')
    parser.add_argument('--check-file', metavar='PATH', help='Validate a JSON configuration file')
    parser.add_argument('--report', metavar='FILE', help='Write a YAML settings report to file')
    parser.add_argument('--config-file', metavar='PATH', help='Load the JSON configuration from PATH')
    parser.add_argument('--env-file', metavar='PATH', help='Read resolver settings from a .env file')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (default: WARNING)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    settings = ResolverSettings.from_env(args.env_file)
    setup_logging(log_level='DEBUG' if args.verbose else args.log_level, log_file=settings.log_file)

    if args.check_file:
        manager = SelfServicePlusSettingsManager(settings, load_document=False)
        try:
            path = manager.load_document_store_strict(args.check_file)
        except SelfServicePlusSettingsError as e:
            print(f"Invalid configuration: {e}")
            return 1
        print(f"Configuration valid: {path} ({len(manager.document_store.keys())} keys)")
        return 0

    if args.describe:
        try:
            spec = spec_for(args.describe)
        except SelfServicePlusSettingsError as e:
            print(str(e))
            return 1
        print(f"Key: {spec.key}")
        print(f"Category: {spec.category.value}")
        print(f"Type: {spec.value_type.value}")
        print(f"Default: {_format(spec.default)}")
        if spec.description:
            print(f"Description: {spec.description}")
        return 0

    if not (args.status or args.show or args.get or args.report):
        parser.print_help()
        return 0

    manager = SelfServicePlusSettingsManager(settings, load_document=args.config_file is None)
    if args.config_file:
        manager.load_document_store(args.config_file)

    if args.get:
        if args.value_type:
            try:
                value_type = ValueType.from_name(args.value_type)
            except SelfServicePlusSettingsError as e:
                print(str(e))
                return 2
            default = None
        elif args.get in CATALOGUE:
            spec = CATALOGUE[args.get]
            value_type, default = spec.value_type, spec.default_value()
        else:
            value_type, default = ValueType.ANY, None

        resolved = manager.resolve(args.get, default, value_type)
        print(f"{args.get} = {_format(resolved.value)} [{resolved.source or 'default'}]")

    if args.status:
        print_status(manager)

    if args.show:
        print_settings(manager)

    if args.report:
        report = manager.create_report()
        with open(args.report, 'w') as f:
            yaml.safe_dump(report, f, default_flow_style=False, sort_keys=False)
        print(f"Settings report saved to {args.report}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
