"""Convert Markdown files on disk into JSON artifacts."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from md2json.config import MD2JSON_LOG_LEVEL
from md2json.exceptions import InputError, Md2jsonError, OutputError
from md2json.parser import create_json

logger = logging.getLogger(__name__)

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2json",
        description="Convert Markdown files into JSON with rendered HTML, a heading tree and metadata.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Markdown files or directories to search for *.md")
    parser.add_argument("-o", "--out", type=Path, default=Path("."), help="Directory for <name>.json output")
    parser.add_argument("--stdout", action="store_true", help="Print JSON instead of writing files")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = log_level(args.verbose)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        files = collect_markdown_files(args.paths)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("%d markdown file(s) found", len(files))
    failures = 0
    written: set[Path] = set()
    for path in files:
        try:
            if args.stdout:
                json_text = create_json(read_markdown(path))
                if json_text:
                    print(json_text)
                continue
            target = convert_file(path, args.out)
        except (Md2jsonError, OSError) as exc:
            logger.error("Failed to convert %s: %s", path, exc)
            failures += 1
            continue
        if target is not None:
            if target in written:
                logger.warning("%s overwritten by %s", target, path)
            written.add(target)

    return 1 if failures else 0


def log_level(verbose: int, configured: str = MD2JSON_LOG_LEVEL) -> int:
    """Return the more verbose of the configured level and the one asked for by ``-v``."""
    requested = _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]
    base = logging.getLevelName(configured)
    if not isinstance(base, int):
        base = logging.WARNING
    return min(base, requested)


def read_markdown(path: Path) -> str:
    """Read a UTF-8 (optionally BOM-prefixed) Markdown file.

    Raises:
        InputError: If the file is not valid UTF-8.
        OSError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InputError(f"{path} is not valid UTF-8: {exc}") from exc


def collect_markdown_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories into their ``*.md`` files, keeping files as given.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*.md") if p.is_file()))
        elif path.is_file():
            files.append(path)
        else:
            raise FileNotFoundError(f"No such file or directory: {path}")
    return files


def convert_file(path: Path, out_dir: Path) -> Path | None:
    """Convert ``path`` and write ``<out_dir>/<stem>.json``.

    An empty document removes a previously written artifact instead.

    Returns:
        The written path, or None when nothing was written.

    Raises:
        InputError: If the source is not valid UTF-8.
        OutputError: If the artifact cannot be written or removed.
    """
    json_text = create_json(read_markdown(path))
    target = out_dir / f"{path.stem}.json"
    try:
        if not json_text:
            if target.exists():
                target.unlink()
                logger.info("%s is empty; removed %s", path, target)
            return None
        out_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(json_text, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Could not update {target}: {exc}") from exc

    logger.info("%s parsed into %s", path, target)
    return target


if __name__ == "__main__":
    sys.exit(main())
