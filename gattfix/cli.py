"""
Command-line interface for gattfix.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Union

# Ensure logging subsystem is initialised immediately
import gattfix.core.log  # noqa: F401

from . import __version__
from gattfix.core.constants import RESULT_ERR, RESULT_OK
from gattfix.core.errors import GattFixError
from gattfix.core.log import print_and_log, LOG__GENERAL, LOG__DEBUG
from gattfix.bt_ref.blocklist import get_blocklist
from gattfix.bt_ref.identifiers import IdentifierRecord
from gattfix.bt_ref.registry import get_registry
from gattfix.bt_ref.uuid_utils import is_valid_uuid
from gattfix.catalog.adapters import adapter_data_set, adapter_data_sets
from gattfix.catalog.catalog import get_catalog
from gattfix.catalog.records import Category


def parse_identifier(text: str) -> Union[int, str]:
    """Command-line identifiers: ``0x``-prefixed hex is an alias, anything else a string."""
    if text[:2].lower() == "0x":
        try:
            return int(text[2:], 16)
        except ValueError:
            return text
    return text


def format_record(record: IdentifierRecord) -> str:
    alias = f"0x{record.alias:04x}" if record.alias is not None else "-"
    return f"{record.kind:<15} {alias:<12} {record.uuid}  {record.name or '-'}"


def _dump(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def cmd_resolve(args) -> int:
    registry = get_registry()
    results = [(text, registry.resolve(parse_identifier(text), args.kind)) for text in args.identifiers]
    if args.json:
        _dump([r.to_dict() for _, r in results])
    else:
        for text, result in results:
            if isinstance(result, IdentifierRecord):
                print(format_record(result))
            else:
                print(f"{text}: {type(result).__name__}: {result.message}")
    return RESULT_OK if all(isinstance(r, IdentifierRecord) for _, r in results) else RESULT_ERR


def cmd_canonical(args) -> int:
    registry = get_registry()
    status = RESULT_OK
    output = []
    for text in args.identifiers:
        result = registry.canonicalize(parse_identifier(text))
        if isinstance(result, str):
            output.append({"identifier": text, "uuid": result})
            if not args.json:
                print(f"{text}: {result}")
        else:
            status = RESULT_ERR
            output.append(result.to_dict())
            if not args.json:
                print(f"{text}: {type(result).__name__}: {result.message}")
    if args.json:
        _dump(output)
    return status


def cmd_validate_uuid(args) -> int:
    verdicts = {candidate: is_valid_uuid(candidate) for candidate in args.candidates}
    if args.json:
        _dump(verdicts)
    else:
        for candidate, valid in verdicts.items():
            print(f"{candidate}: {'valid' if valid else 'invalid'}")
    return RESULT_OK if all(verdicts.values()) else RESULT_ERR


def cmd_list(args) -> int:
    test_catalog = get_catalog()
    categories = [Category(args.category)] if args.category else test_catalog.categories()
    if args.json:
        _dump({c.value: [r.to_dict() for r in test_catalog.catalog(c)] for c in categories})
        return RESULT_OK
    for category in categories:
        print(f"[{category.value}]")
        for record in test_catalog.catalog(category):
            target = record.target if record.target is not None else "-"
            disconnect = {True: "disconnect", False: "stay", None: "unspecified"}[record.must_disconnect]
            print(f"  {record.label:<8} {str(target):<40} {record.expect.value:<15} {disconnect}")
        print("")
    return RESULT_OK


def cmd_check(args) -> int:
    problems = get_catalog().check_consistency(get_registry(), get_blocklist())
    if args.json:
        _dump({"problems": problems})
    elif problems:
        for problem in problems:
            print(problem)
    else:
        print_and_log("[+] Catalogs agree with the registry and blocklist", LOG__GENERAL)
    return RESULT_ERR if problems else RESULT_OK


def cmd_adapters(args) -> int:
    data_sets = [adapter_data_set(args.name)] if args.name else adapter_data_sets()
    if args.json:
        _dump([d.to_dict() for d in data_sets])
        return RESULT_OK
    for data_set in data_sets:
        print(f"{data_set.name}: present={data_set.present} powered={data_set.powered} "
              f"discoverable={data_set.discoverable} devices={len(data_set.devices)}")
        for device in data_set.devices:
            print(f"  {device.address}  {device.name}  services={len(device.services)}")
    return RESULT_OK


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Output results in JSON format")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        description="gattfix - GATT conformance-test fixture library", prog="gattfix"
    )
    parser.add_argument("--version", action="version", version=f"gattfix {__version__}")
    subparsers = parser.add_subparsers(dest="mode", help="Operation mode")

    resolve_parser = subparsers.add_parser("resolve", parents=[common], help="Resolve identifiers to records")
    resolve_parser.add_argument("identifiers", nargs="+", help="Alias (0x...), name or UUID")
    resolve_parser.add_argument("--kind", choices=["service", "characteristic", "descriptor"])
    resolve_parser.set_defaults(func=cmd_resolve)

    canonical_parser = subparsers.add_parser("canonical", parents=[common], help="Canonical UUID for identifiers")
    canonical_parser.add_argument("identifiers", nargs="+", help="Alias (0x...), name or UUID")
    canonical_parser.set_defaults(func=cmd_canonical)

    validate_parser = subparsers.add_parser("validate-uuid", parents=[common], help="Syntactic UUID check")
    validate_parser.add_argument("candidates", nargs="+")
    validate_parser.set_defaults(func=cmd_validate_uuid)

    list_parser = subparsers.add_parser("list", parents=[common], help="List test-case catalogs")
    list_parser.add_argument("category", nargs="?", choices=[c.value for c in Category])
    list_parser.set_defaults(func=cmd_list)

    check_parser = subparsers.add_parser("check", parents=[common], help="Cross-check catalogs against reference data")
    check_parser.set_defaults(func=cmd_check)

    adapters_parser = subparsers.add_parser("adapters", parents=[common], help="Show mock adapter data sets")
    adapters_parser.add_argument("name", nargs="?")
    adapters_parser.set_defaults(func=cmd_adapters)

    return parser.parse_args(args)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if not getattr(args, "func", None):
        parse_args(["--help"])
        return RESULT_ERR

    if args.verbose:
        logging.getLogger("gattfix").setLevel(logging.DEBUG)
    print_and_log(f"[*] gattfix {args.mode}", LOG__DEBUG)

    try:
        return args.func(args)
    except GattFixError as e:
        print(f"Error: {e}", file=sys.stderr)
        return RESULT_ERR


if __name__ == "__main__":
    sys.exit(main())
