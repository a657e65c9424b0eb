"""CLI entrypoint for fnexpr."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from fnexpr import __version__
from fnexpr.config import build_factory, load_config, validate_config
from fnexpr.constants.branding import CLI_DESCRIPTION
from fnexpr.core.evaluator import TypedEvaluator
from fnexpr.exceptions import ConfigError, FnexprError, InvalidArgumentError
from fnexpr.types.result import parse_type_name

logger = logging.getLogger(__name__)


def _yaml_value(text: str) -> Any:
    """Parse a command-line value as YAML so numbers, lists and maps keep their type."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise argparse.ArgumentTypeError(f"invalid value {text!r}: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="fnexpr", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("eval", help="Evaluate an expression against a target value")
    source = evaluate.add_mutually_exclusive_group(required=True)
    source.add_argument("-e", "--expr", help="Expression text, e.g. \"#target + 10\"")
    source.add_argument("-n", "--name", help="Name of an expression defined in the config file")
    evaluate.add_argument("-t", "--type", default=None, help="Declared result type (default: object)")
    evaluate.add_argument(
        "--target",
        type=_yaml_value,
        default=None,
        help="Target value, parsed as YAML (e.g. 5, one, [1, 2])",
    )
    evaluate.add_argument(
        "-p",
        "--param",
        type=_yaml_value,
        action="append",
        default=[],
        help="Expression parameter, parsed as YAML (repeat flag for multiple values)",
    )
    evaluate.add_argument("-i", "--index", type=int, default=None, help="Iteration index exposed as #index")
    evaluate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding fnexpr.yaml")
    evaluate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    validate = subparsers.add_parser("validate-config", help="Compile every configured expression")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Directory holding fnexpr.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "eval":
        parser.error(f"Unsupported command: {args.command}")

    try:
        evaluator = _resolve_evaluator(args)
        result = evaluator.evaluate(args.target, args.index)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except FnexprError as exc:
        print(f"Evaluation error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, default=str))
    return 0


def _resolve_evaluator(args: argparse.Namespace) -> TypedEvaluator:
    """Build the evaluator selected by ``--expr`` or ``--name``."""
    config = load_config(args.root, args.config)
    factory = build_factory(config)

    if args.name is not None:
        if args.type is not None or args.param:
            raise ConfigError("--type and --param cannot be combined with --name")
        definition = config.get(args.name)
        if definition is None:
            defined = ", ".join(sorted(config.expression_names)) or "none"
            raise ConfigError(f"Unknown expression '{args.name}'; defined: {defined}")
        return factory.eval_for(definition.result_type, definition.source, *definition.parameters)

    try:
        result_type = parse_type_name(args.type or "object")
    except InvalidArgumentError as exc:
        raise ConfigError(str(exc)) from exc
    logger.debug("Evaluating %r as %s", args.expr, result_type)
    return factory.eval_for(result_type, args.expr, *args.param)


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Load config, compile every expression and report results."""
    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    errors = validate_config(config)
    if errors:
        print("\n".join(errors), file=sys.stderr)
        return 2

    print(f"Configuration is valid ({len(config.expressions)} expression(s)).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
