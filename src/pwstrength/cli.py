# SPDX-License-Identifier: MIT
"""
pwstrength - Command Line Interface

This CLI provides:
- pwstrength version
- pwstrength init
- pwstrength check [PASSWORD ...] --stdin --format {text,json} --locale {en,pt}
  --config <path> --fail-below {weak,medium,strong} --explain

Passwords are never printed in plaintext; every output is redacted.
"""

import argparse
import getpass
import json
import logging
import sys

from . import __version__
from .classify import explain
from .classify.labels import LABELS, label_for
from .config import CATEGORY_NAMES, OUTPUT_FORMATS, create_default_config_template, load_config
from .core.exceptions import PWStrengthConfigError
from .core.redaction import redact_password, redact_results
from .policy.gate import enforce_minimum, parse_category

logger = logging.getLogger(__name__)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="pwstrength", description="Password strength checker")
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")
    sub.add_parser("init", help="print a .pwstrength.yml template")

    cp = sub.add_parser("check", help="classify one or more passwords")
    cp.add_argument("passwords", nargs="*", help="passwords to check (prompted if omitted)")
    cp.add_argument(
        "--stdin",
        action="store_true",
        help="read passwords from stdin, one per line"
    )
    cp.add_argument(
        "--format",
        choices=list(OUTPUT_FORMATS),
        help="output format (default: from config, else text)"
    )
    cp.add_argument(
        "--locale",
        choices=sorted(LABELS),
        help="label set (default: from config, else en)"
    )
    cp.add_argument(
        "--config",
        help="path to config YAML file"
    )
    cp.add_argument(
        "--fail-below",
        dest="fail_below",
        choices=list(CATEGORY_NAMES),
        help="exit with status 1 if any password is below this category"
    )
    cp.add_argument(
        "--explain",
        action="store_true",
        help="show the rule that decided each result"
    )
    cp.add_argument(
        "--verbose",
        action="store_true",
        help="enable debug logging"
    )

    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd == "init":
        print(create_default_config_template(), end="")
        return 0

    if args.cmd == "check":
        return handle_check_command(args)

    p.print_help()
    return 0


def handle_check_command(args):
    """Handle the check subcommand."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[pwstrength] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config)
    except PWStrengthConfigError as e:
        print(f"CONFIG ERROR: {e}", file=sys.stderr)
        return 1

    output_format = args.format or config["format"]
    locale = args.locale or config["locale"]
    fail_below = args.fail_below or config["fail_below"]

    passwords = read_passwords(args)

    outcomes = [explain(password) for password in passwords]

    results = []
    for password, outcome in zip(passwords, outcomes):
        results.append({
            "password": password,
            "category": outcome.category.value,
            "label": label_for(outcome.category, locale, config["labels"]),
            "rule": outcome.rule,
            "features": outcome.features.to_dict() if outcome.features else None,
        })

    gate = None
    if fail_below:
        categories = [outcome.category for outcome in outcomes]
        gate = enforce_minimum(categories, parse_category(fail_below))

    if output_format == "json":
        output = {
            "results": redact_results(results),
            "gate": gate.to_dict() if gate else None,
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print_text_summary(results, gate, explain_rules=args.explain)

    if gate is not None and not gate.passed:
        return 1

    return 0


def read_passwords(args):
    """Collect passwords from arguments, stdin, or an interactive prompt."""
    if args.stdin:
        passwords = [line.rstrip("\r\n") for line in sys.stdin]
        source = "stdin"
    elif args.passwords:
        passwords = list(args.passwords)
        source = "arguments"
    else:
        passwords = [getpass.getpass("Password: ")]
        source = "prompt"

    logger.debug("Read %d password(s) from %s", len(passwords), source)
    return passwords


def print_text_summary(results, gate, explain_rules=False):
    """Print one redacted line per result, then the gate outcome."""
    for result in results:
        line = f"{redact_password(result['password'])}  {result['label']}"
        if explain_rules:
            line += f"  [{result['rule']}]"
        print(line)

    if gate is not None:
        if gate.passed:
            print(f"Minimum {gate.minimum.value}: PASSED")
        else:
            print(
                f"Minimum {gate.minimum.value}: FAILED "
                f"({len(gate.failures)} of {gate.summary['total']} below minimum)"
            )


if __name__ == "__main__":
    raise SystemExit(main())
