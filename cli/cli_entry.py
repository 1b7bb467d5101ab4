"""
cli_entry.py - CLI Entry Point

Previews the name each transformation would produce. Nothing is renamed.
"""

import argparse
import sys
import logging
from typing import List, Optional

from namely import (
    FileNameRef,
    CaseMode,
    Operation,
    TransformOptions,
    NamelyError,
    FilesystemUnavailableError,
    apply_operation,
    is_valid_filename,
    size_in_kib,
)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="namely",
        description="File name transformation preview",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reverse the base name
  namely reverse report.txt

  # Swap the parts around a separator
  namely swap "Artist - Title.mp3" --separator -

  # String replacement
  namely replace foo_bar.txt --old _ --new -

  # Letter case
  namely case REPORT.TXT --mode lower

  # File size in KB
  namely size ./photos/img_001.jpg
"""
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # reverse subcommand
    reverse_parser = subparsers.add_parser("reverse", help="Reverse the base name")
    reverse_parser.add_argument("names", nargs="+", help="File names or paths")

    # swap subcommand
    swap_parser = subparsers.add_parser("swap", help="Swap the parts around a separator")
    swap_parser.add_argument("names", nargs="+", help="File names or paths")
    swap_parser.add_argument("--separator", "-s", type=str, default="-", help="Separator character")
    swap_parser.add_argument("--no-spacing", action="store_true", help="No spaces around the separator")

    # replace subcommand
    replace_parser = subparsers.add_parser("replace", help="String replacement")
    replace_parser.add_argument("names", nargs="+", help="File names or paths")
    replace_parser.add_argument("--old", "-o", type=str, required=True, help="String to replace")
    replace_parser.add_argument("--new", "-n", type=str, default="", help="Replacement string")
    replace_parser.add_argument("--ignore-case", "-i", action="store_true", help="Case-insensitive matching")

    # case subcommand
    case_parser = subparsers.add_parser("case", help="Change letter case")
    case_parser.add_argument("names", nargs="+", help="File names or paths")
    case_parser.add_argument("--mode", "-m", type=str, default="lower",
                             choices=[m.value for m in CaseMode], help="Case mode")

    # size subcommand
    size_parser = subparsers.add_parser("size", help="Show file size in KB")
    size_parser.add_argument("files", nargs="+", help="File paths")

    return parser


def build_options(args) -> TransformOptions:
    """Map parsed arguments to transformation options"""
    options = TransformOptions()
    if args.command == Operation.SWAP.value:
        options.separator = args.separator
        options.add_spacing = not args.no_spacing
    elif args.command == Operation.REPLACE.value:
        options.original = args.old
        options.replacement = args.new
        options.case_sensitive = not args.ignore_case
    elif args.command == Operation.CASE.value:
        options.case_mode = CaseMode(args.mode)
    return options


def cmd_transform(args) -> int:
    """Handle reverse/swap/replace/case commands"""
    operation = Operation(args.command)
    options = build_options(args)

    print(f"Proposed names ({operation.value}):")
    print("-" * 80)
    warnings = []
    for raw in args.names:
        ref = FileNameRef.from_path(raw)
        try:
            new_ref = apply_operation(ref, operation, options)
        except NamelyError as e:
            print(f"Error: {e}")
            return 1

        note = "" if new_ref != ref else " (unchanged)"
        print(f"  {ref.name:<40} -> {new_ref.name}{note}")

        valid, reason = is_valid_filename(new_ref.name)
        if not valid:
            warnings.append(f"{new_ref.name!r}: {reason}")
    print("-" * 80)

    if warnings:
        print("Warnings:")
        for warn in warnings:
            print(f"  - {warn}")

    return 0


def cmd_size(args) -> int:
    """Handle size command"""
    failed = 0
    for raw in args.files:
        ref = FileNameRef.from_path(raw)
        try:
            size = size_in_kib(ref)
        except FilesystemUnavailableError as e:
            print(f"Error: {e}")
            failed += 1
            continue
        print(f"  {ref.name:<50} {size:>10} KB")

    return 0 if failed == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "size":
        return cmd_size(args)
    elif args.command in {op.value for op in Operation}:
        return cmd_transform(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
