"""
Command-line interface for casefix.

    casefix check my_variable userName --kind local
    casefix tokenize HTTPServer parse_json2Data
    casefix info

``check`` exits with status 1 when any name needs rewriting.
"""

import argparse
import json
import sys
from typing import List, Optional

from .naming import (
    KIND_NAMES,
    NamingAnalyzer,
    RewritePolicy,
    SymbolDescriptor,
    descriptor_from_name,
    parse_strategy,
    tokenize,
)
from .utils.config import CasefixConfig, get_config, set_config
from .utils.constants import CapitalizationStrategy
from .utils.exceptions import CasefixError
from .utils.info import print_info
from .utils.logging import get_logger, setup_logging
from .utils.string_utils import sanitize_identifier

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casefix",
        description="Check identifiers against naming conventions and suggest fixes.",
    )
    parser.add_argument("--config", help="Path to a JSON or YAML configuration file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    check = subparsers.add_parser("check", help="Check names and print suggested replacements")
    check.add_argument("names", nargs="+", help="Identifiers to check")
    check.add_argument("--kind", default="local", choices=KIND_NAMES, help="Symbol kind (default: local)")
    visibility = check.add_mutually_exclusive_group()
    visibility.add_argument(
        "--public", dest="public", action="store_true", default=None,
        help="Field is publicly visible (default for --kind const)",
    )
    visibility.add_argument(
        "--private", dest="public", action="store_false",
        help="Field is private (default for static-readonly and field); private consts are exempt",
    )
    check.set_defaults(public=None)
    check.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in CapitalizationStrategy],
        help="Capitalization strategy (overrides configuration)",
    )
    check.add_argument("--drop-digits", action="store_true", help="Remove digits from rewritten names")
    check.add_argument("--json", action="store_true", help="Emit violations as JSON")

    tokens = subparsers.add_parser("tokenize", help="Print the word fragments of each name")
    tokens.add_argument("names", nargs="+", help="Identifiers to split")
    tokens.add_argument("--drop-digits", action="store_true", help="Drop digits from fragments")

    subparsers.add_parser("info", help="Show version and active configuration")
    return parser


def _build_policy(args: argparse.Namespace, config: CasefixConfig) -> RewritePolicy:
    policy = RewritePolicy.from_config(config)
    strategy = parse_strategy(args.strategy) if args.strategy else policy.strategy
    retain_digits = policy.retain_digits and not args.drop_digits
    return RewritePolicy(retain_digits=retain_digits, strategy=strategy, sentinels=policy.sentinels)


def run_check(args: argparse.Namespace, config: CasefixConfig) -> int:
    descriptor: SymbolDescriptor = descriptor_from_name(args.kind, public=args.public)
    analyzer = NamingAnalyzer(policy=_build_policy(args, config), config=config)
    violations = analyzer.analyze((name, descriptor) for name in args.names)

    if args.json:
        print(json.dumps([violation.to_dict() for violation in violations], indent=2))
    else:
        flagged = {violation.name: violation for violation in violations}
        for name in args.names:
            violation = flagged.get(name)
            if violation is None:
                print(f"{name}: ok")
            else:
                print(f"{name} -> {violation.suggestion}")

    return 1 if violations else 0


def run_tokenize(args: argparse.Namespace) -> int:
    for name in args.names:
        fragments = tokenize(sanitize_identifier(name), retain_digits=not args.drop_digits)
        print(f"{name}: {' '.join(fragments)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the casefix command."""
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            set_config(CasefixConfig(args.config))
        config = get_config()

        log_file = config.logging.log_file if config.logging.enable_file_logging else None
        setup_logging(level=args.log_level or config.logging.level, log_file=log_file)

        if args.command == "check":
            return run_check(args, config)
        if args.command == "tokenize":
            return run_tokenize(args)
        print_info()
        return 0
    except CasefixError as e:
        logger.debug(f"{args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
