#!/usr/bin/env python3
"""
taskreflect CLI

Runs the REFLECT tool over a payload file (or stdin) and renders the
resulting task records, and prints the tool descriptors the planner sees.
"""

import sys
import json
import logging
import argparse
import asyncio
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from . import __version__
from .config import Settings, load_env_file
from .core.types import ExecutionResult
from .tools import create_default_registry
from .utils.logger import get_logger

# ==================== Constants ====================
TASKREFLECT_THEME = Theme(
    {
        "info": "dim cyan",
        "warning": "yellow",
        "danger": "bold red",
        "success": "bold green",
        "heading": "bold blue",
        "muted": "dim white",
    }
)


def get_console(theme: bool = True) -> Console:
    """Get a rich console, themed by default"""
    if theme:
        return Console(theme=TASKREFLECT_THEME, highlight=False)
    return Console(highlight=False)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger and return the CLI logger"""
    # stdout carries command output
    get_logger("taskreflect", level=level, stream=sys.stderr)
    return logging.getLogger("taskreflect.cli")


# ==================== Commands ====================
def read_payload(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def render_result(console: Console, result: ExecutionResult) -> None:
    """Render a REFLECT result as a table of tasks and sub-problems"""
    if not result.success:
        console.print(Panel(escape(result.error), title="REFLECT failed", style="danger"))
        return

    payload = result.result
    table = Table(title=f"{payload['tasks_count']} new task(s)", show_lines=True)
    table.add_column("ID", style="muted")
    table.add_column("Description", style="heading")
    table.add_column("Reasoning")
    table.add_column("Sub-problems")

    for task in payload["new_tasks"]:
        sub_problems = "\n".join(
            f"{index}. {sub['description']}"
            for index, sub in enumerate(task["sub_problems"], start=1)
        )
        table.add_row(
            task["id"], escape(task["description"]), escape(task["reasoning"]), escape(sub_problems)
        )

    console.print(table)


def parse_command(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    """Run the REFLECT tool over a payload.

    Returns:
        Exit code: 0 on success, 1 on a rejected payload.
    """
    payload = read_payload(args.file)
    registry = create_default_registry(settings=settings)
    tool = registry.get_tool("REFLECT")

    result = asyncio.run(tool.execute({"new_tasks": payload}))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        render_result(console, result)
    return 0 if result.success else 1


def info_command(args: argparse.Namespace, settings: Settings, console: Console) -> int:
    """Print the descriptors of the available tools"""
    registry = create_default_registry(settings=settings)

    if args.json:
        print(json.dumps([tool.to_dict() for tool in registry.get_all_tools()], indent=2))
        return 0

    for tool_info in registry.get_tool_infos():
        info = tool_info.model_dump(mode="json")
        console.print(f"[heading]{info['name']}[/heading] [muted]({info['type']})[/muted]")
        console.print(f"  {escape(info['description'])}")
        for param in info["parameters"]:
            required = "required" if param["required"] else "optional"
            console.print(f"  - [success]{param['name']}[/success] ({param['type']}, {required})")
            console.print(f"    {escape(param['description'])}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskreflect",
        description="Turn REFLECT payloads into task records",
        epilog=f"taskreflect version {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Enable verbose logging",
    )
    parser.add_argument("--env", "-e", help="Path to .env file")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    parse_parser = subparsers.add_parser("parse", help="Parse a REFLECT payload")
    parse_parser.add_argument("file", nargs="?", help="Payload file (default: stdin)")
    parse_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    info_parser = subparsers.add_parser("info", help="Show tool descriptors")
    info_parser.add_argument("--json", action="store_true", help="Print descriptors as JSON")

    subparsers.add_parser("version", help="Show taskreflect version")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    console = get_console()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        load_env_file(args.env)
        settings = Settings.from_env()
    except (FileNotFoundError, ValidationError) as e:
        console.print(f"[danger]Error: {escape(str(e))}[/danger]")
        return 1

    log_level = logging.DEBUG if args.verbose >= 1 else settings.log_level
    logger = setup_logging(log_level)

    try:
        if args.command == "parse":
            return parse_command(args, settings, console)
        elif args.command == "info":
            return info_command(args, settings, console)
        elif args.command == "version":
            console.print(f"taskreflect version {__version__}")
            return 0
        else:
            parser.print_help()
            return 0
    except KeyboardInterrupt:
        console.print("\nOperation cancelled by user")
        return 0
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error executing command: {str(e)}")
        console.print(f"[danger]Error: {escape(str(e))}[/danger]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
