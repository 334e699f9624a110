from __future__ import annotations

import argparse
import os
import stat
from typing import NoReturn

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)

from ext_renamer import settings
from ext_renamer.container import build_services
from ext_renamer.domain.models import RenameResult
from ext_renamer.logging_setup import configure_logging

FOLDER_PROMPT = "Enter the path to the folder (e.g., /path/to/your/files or . for current directory):"
OLD_EXT_PROMPT = "Enter original extension (ex=>jpg)"
NEW_EXT_PROMPT = "Enter new extension (ex=>jpeg)"


def _ask(prompt: str) -> str:
    print(prompt)
    try:
        return input().strip()
    except EOFError:
        return ""


def _fail(message: str) -> NoReturn:
    print(message)
    raise SystemExit(1)


def _validate_folder(folder_path: str) -> None:
    try:
        info = os.stat(folder_path)
    except FileNotFoundError:
        _fail(f"Error: Folder path '{folder_path}' does not exist.")
    except OSError as exc:
        _fail(f"Error accessing folder path '{folder_path}': {exc}")
    if not stat.S_ISDIR(info.st_mode):
        _fail(f"Error: Path '{folder_path}' is not a directory.")


def _validate_extension(ext: str, label: str) -> None:
    if ext.strip().lstrip(".") == "":
        _fail(f"Error: {label} extension cannot be empty.")
    if any(sep and sep in ext for sep in (os.sep, os.altsep, "/")):
        _fail(f"Error: {label} extension cannot contain a path separator.")


def print_result(result: RenameResult) -> None:
    if result.errors:
        print("Errors encountered:")
        for error in result.errors:
            print("- ", error)

    if result.renamed:
        print("Successfully renamed files:")
        for path in result.renamed:
            print("- ", path)
        print(f"{len(result.renamed)} file(s) renamed successfully.")

    if not result.renamed and not result.errors:
        print("No files found with the original extension or no files needed renaming.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Rename every file in a folder from one extension to another."
    )
    parser.add_argument("old_ext", nargs="?", help="Original extension, e.g. jpg or .jpg.")
    parser.add_argument("new_ext", nargs="?", help="New extension, e.g. jpeg or .jpeg.")
    parser.add_argument("--dir", dest="folder", help="Folder to process (prompted if omitted).")
    args = parser.parse_args(argv)

    try:
        configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    except ValueError:
        _fail(f"Error: Invalid log level '{settings.LOG_LEVEL}'.")

    folder_path = args.folder or settings.DEFAULT_DIR or _ask(FOLDER_PROMPT)
    _validate_folder(folder_path)

    old_ext = args.old_ext if args.old_ext is not None else _ask(OLD_EXT_PROMPT)
    _validate_extension(old_ext, "Original")

    new_ext = args.new_ext if args.new_ext is not None else _ask(NEW_EXT_PROMPT)
    _validate_extension(new_ext, "New")

    rename_service = build_services()["rename_service"]
    result = rename_service.change_extensions(old_ext, new_ext, folder_path)
    print_result(result)


if __name__ == "__main__":
    main()
