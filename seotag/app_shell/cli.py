import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from seotag.components.metadata import ResolveMetadataInput, run
from seotag.core.entities import PaginationState
from seotag.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def load_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML (or JSON) file holding one mapping."""
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def handle_resolve(args: argparse.Namespace) -> None:
    for path in (args.page, args.site):
        if path is not None and not path.exists():
            logger.error(f"File {path} not found.")
            sys.exit(1)

    rules_path = args.rules
    if rules_path is None and Path(RULES_PATH).exists():
        rules_path = Path(RULES_PATH)

    try:
        rules = load_rules(rules_path)
        page = load_mapping(args.page)
        site = load_mapping(args.site) if args.site else {}
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(str(e))
        sys.exit(1)

    pagination = None
    if args.page_number is not None:
        pagination = PaginationState(current=args.page_number, total=args.total_pages or 0)

    inp = ResolveMetadataInput(page=page, site=site, pagination=pagination, text=args.text)
    try:
        output = run(inp, rules=rules)
    except ValueError as e:
        logger.error(f"Could not resolve metadata for {args.page}: {e}")
        sys.exit(1)

    for warning in output.warnings:
        logger.warning(f"{warning.field}: {warning.message}")

    print(json.dumps(output.metadata.to_dict(), indent=2, ensure_ascii=False, default=str))


def main() -> None:
    parser = argparse.ArgumentParser(description="seotag metadata resolver")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # resolve
    resolve_parser = subparsers.add_parser("resolve", help="Resolve metadata for one page")
    resolve_parser.add_argument("page", type=Path, help="YAML file with page fields")
    resolve_parser.add_argument("--site", type=Path, help="YAML file with site fields")
    resolve_parser.add_argument("--rules", type=Path, help=f"Rules file (default {RULES_PATH})")
    resolve_parser.add_argument("--page-number", type=int, help="Current paginator page")
    resolve_parser.add_argument("--total-pages", type=int, help="Total paginator pages")
    resolve_parser.add_argument("--text", default="", help="Raw tag markup, e.g. title=false")

    args = parser.parse_args()

    if args.command == "resolve":
        handle_resolve(args)


if __name__ == "__main__":
    main()
