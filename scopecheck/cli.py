#!/usr/bin/env python3
"""
ScopeCheck: Scan Target List Validator
Description:
    This script is the MAIN ENTRY POINT of ScopeCheck.
    It reads a target list from a file, stdin or the terminal, validates every
    line, and prints line-addressed errors before anything reaches a scanner.
"""

import argparse
import sys

from scopecheck.core.interaction import UserInteraction as Interaction
from scopecheck.engine import EXIT_ERROR, Engine


# --------------------------------------
# Helper Functions
# --------------------------------------
def build_parser():
    parser = argparse.ArgumentParser(
        prog="scopecheck",
        description="Validate scan targets (IPv4, CIDR, IP range, domain) one per line.",
    )
    parser.add_argument(
        "targets_file", nargs="?",
        help="File with one target per line; '-' reads stdin; omit to paste interactively",
    )
    parser.add_argument("-c", "--config", help="Path to config.yaml")
    parser.add_argument("-b", "--batch-size", type=int, help="Addresses per batch when splitting")
    parser.add_argument("--split", action="store_true", help="Print targets split into batches")
    parser.add_argument("--json", action="store_true", help="Print failures as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug output on the console")
    return parser


def read_targets(path, interaction):
    """
    Read raw target text from a file, stdin ('-') or the terminal.
    """
    if path is None:
        return interaction.collect_targets()
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


# --------------------------------------
# Main Function
# --------------------------------------
def main(argv=None):
    args = build_parser().parse_args(argv)
    interaction = Interaction()

    try:
        engine = Engine(
            config_path=args.config,
            batch_size=args.batch_size,
            log_level="DEBUG" if args.verbose else None,
        )
        text = read_targets(args.targets_file, interaction)
    except (OSError, ValueError) as e:
        print(f"[ERROR] {e}")
        return EXIT_ERROR

    # only prompt when the targets came from the terminal
    prompt = interaction if args.targets_file is None else None
    return engine.run(text, split=args.split, as_json=args.json, interaction=prompt)


# --------------------------------------
# Entry Point
# --------------------------------------
def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Exiting gracefully...")
        sys.exit(0)


if __name__ == "__main__":
    run()
