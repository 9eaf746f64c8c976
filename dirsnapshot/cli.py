import argparse
import json
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from dirsnapshot.config.settings import settings
from dirsnapshot.container import container
from dirsnapshot.entities.directory_snapshot import DirectorySnapshot
from dirsnapshot.entities.snapshot_options import PathMode, SnapshotOptions
from dirsnapshot.entities.tree_node import TreeNode
from dirsnapshot.exceptions import BaseAppError


def _add_snapshot_flags(parser: argparse.ArgumentParser) -> None:
    defaults = settings.default_options()
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=defaults.recursive,
        help="Walk the whole subtree",
    )
    parser.add_argument(
        "--files-only",
        action="store_true",
        default=defaults.files_only,
        help="Leave directories out of the entries",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--absolute",
        dest="path_mode",
        action="store_const",
        const=PathMode.ABSOLUTE,
        help="Render resolved absolute paths",
    )
    mode.add_argument(
        "--relative",
        dest="path_mode",
        action="store_const",
        const=PathMode.RELATIVE,
        help="Render paths relative to the snapshot root",
    )
    parser.set_defaults(path_mode=defaults.path_mode)


def _options(args: argparse.Namespace) -> SnapshotOptions:
    return SnapshotOptions.from_path_mode(
        args.path_mode, recursive=args.recursive, files_only=args.files_only
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirsnap",
        description="Take point-in-time snapshots of a directory and act on them.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output (tables and trees) with colors",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="List the entries of a directory")
    list_cmd.add_argument("path", help="Directory to snapshot")
    _add_snapshot_flags(list_cmd)

    tree_cmd = commands.add_parser("tree", help="Show the nested directory tree")
    tree_cmd.add_argument("path", help="Directory to snapshot")

    rm_cmd = commands.add_parser("rm", help="Delete one file tracked by a snapshot")
    rm_cmd.add_argument("path", help="Directory to snapshot")
    rm_cmd.add_argument("entry", help="Entry value, or slot number with --index")
    rm_cmd.add_argument(
        "--index", action="store_true", help="Treat ENTRY as a slot number"
    )
    _add_snapshot_flags(rm_cmd)

    copy_cmd = commands.add_parser("copy", help="Recursively copy a directory")
    copy_cmd.add_argument("path", help="Directory to copy")
    copy_cmd.add_argument("destination", help="Directory to copy into")
    copy_cmd.add_argument(
        "--no-full",
        dest="full",
        action="store_false",
        help="Copy the contents directly into DESTINATION",
    )

    empty_cmd = commands.add_parser("empty", help="Recursively delete a directory's contents")
    empty_cmd.add_argument("path", help="Directory to empty")
    empty_cmd.add_argument(
        "--remove", action="store_true", help="Also remove the directory itself"
    )
    return parser


def _print_entries(console: Console, snapshot: DirectorySnapshot) -> None:
    table = Table(
        title=f"{snapshot.path} ({snapshot.options.path_mode.value})",
        box=box.ROUNDED,
        border_style="magenta",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("entry")
    for index, value in snapshot.items():
        table.add_row(str(index), value)
    console.print(table)


def _add_branch(branch: Tree, node: TreeNode) -> None:
    for key, value in node.items():
        if isinstance(value, TreeNode):
            _add_branch(branch.add(f"[bold blue]{key}[/]"), value)
        else:
            branch.add(value)


def _print_tree(console: Console, snapshot: DirectorySnapshot) -> None:
    for root, node in snapshot.tree.items():
        tree = Tree(f"[bold magenta]{root}[/]")
        _add_branch(tree, node)
        console.print(tree)


def _run(args: argparse.Namespace, console: Console) -> Any:
    create = container.get_create_snapshot_use_case()

    if args.command == "list":
        snapshot = create.execute(args.path, _options(args))
        if args.pretty:
            _print_entries(console, snapshot)
            return None
        return snapshot.files

    if args.command == "tree":
        snapshot = create.execute(args.path)
        if args.pretty:
            _print_tree(console, snapshot)
            return None
        return {root: node.to_dict() for root, node in snapshot.tree.items()}

    if args.command == "rm":
        snapshot = create.execute(args.path, _options(args))
        if args.index:
            snapshot.delete_entry(int(args.entry))
        else:
            snapshot.delete_entry_by_name(args.entry)
        return {"deleted": args.entry, "count": len(snapshot)}

    if args.command == "copy":
        snapshot = create.execute(args.path)
        return {"copied_to": snapshot.copy_to(args.destination, args.full)}

    if args.command == "empty":
        snapshot = create.execute(args.path)
        snapshot.empty_dir(remove=args.remove)
        return {"emptied": snapshot.path, "removed": args.remove}

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    console = Console(soft_wrap=True)

    try:
        result = _run(args, console)
    except ValueError as e:
        # --index with a non-numeric entry
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result is None:
        return 0
    if args.pretty:
        console.print_json(data=result)
    else:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
