#!/usr/bin/env python3
"""
Maple Search CLI
================
Run the launcher search from a terminal.

Usage:
    maple-search "create a ticket about login"   # one-shot
    maple-search                                 # interactive
"""

import argparse
import logging
from typing import List, Optional

from smart_search.results import ResultItem

from .view_model import SearchViewModel, create_view_model


HELP_TEXT = """  /up     - Move selection up
  /down   - Move selection down
  /open   - Activate selected result
  /help   - Show this help
  /quit   - Exit"""


def format_results(results: List[ResultItem]) -> str:
    lines = []
    for i, result in enumerate(results):
        shortcut = f"  {result.shortcut}" if result.shortcut else ""
        lines.append(f"  {i}. [{result.icon}] {result.title}{shortcut}")
    return "\n".join(lines)


def render_panel(view_model: SearchViewModel) -> str:
    """Visible results as drawn in the panel, selected row marked."""
    selection = view_model.selection
    lines = []
    for result in selection.display_order():
        marker = ">" if result == selection.selected_item else " "
        shortcut = f"  {result.shortcut}" if result.shortcut else ""
        lines.append(f"{marker} [{result.icon}] {result.title}{shortcut}")
    return "\n".join(lines)


def run_interactive(view_model: SearchViewModel) -> None:
    print("Maple Search")
    print("=" * 50)
    print("Type a query, or a command:")
    print(HELP_TEXT)
    print()

    while True:
        try:
            line = input("Search: ").strip()
        except (KeyboardInterrupt, EOFError):
            break
        if not line:
            continue

        if line.startswith('/'):
            cmd = line[1:].lower()
            if cmd in ('quit', 'q'):
                break
            elif cmd == 'up':
                view_model.move_up()
            elif cmd == 'down':
                view_model.move_down()
            elif cmd == 'open':
                if view_model.activate() is None:
                    print("  Nothing to open")
                if view_model.error:
                    print(f"  Error: {view_model.error}")
                continue
            elif cmd == 'help':
                print(HELP_TEXT)
                continue
            else:
                print(f"  Unknown command: /{cmd}")
                continue
        else:
            view_model.perform_search(line)

        panel = render_panel(view_model)
        print(panel if panel else "  No results")
        print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Maple launcher search")
    parser.add_argument("query", nargs="*", help="Query to run once (interactive if omitted)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    view_model = create_view_model()

    if args.query:
        query = " ".join(args.query)
        results = view_model.perform_search(query)
        print(f"Query: {query}")
        print("-" * 40)
        print(format_results(results) if results else "  No results")
        return 0

    run_interactive(view_model)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
