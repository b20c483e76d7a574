"""Mnemo CLI entry point.

Allows running via `python -m mnemo` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Settings, config_file_path, load_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_version_string() -> str:
    try:
        return importlib.metadata.version("mnemo")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="mnemo",
        description="Memorise short texts by revealing them line by line or word by word.",
        epilog=f"Settings file: {config_file_path()}",
    )
    p.add_argument('text', nargs='?', help='Name of a text to open straight away (without .txt)')
    p.add_argument('-V', '--version', action='store_true', help='Print the version and exit')
    p.add_argument('-l', '--list', action='store_true', help='List available texts and exit')
    p.add_argument('--texts-dir', type=Path, help='Directory holding <name>.txt texts')
    p.add_argument('--log-file', type=Path, help='Write a debug log to this file')
    p.add_argument('--log-level', default='INFO',
                   choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                   help='Log level for --log-file (default: INFO)')
    return p.parse_args(argv)


def configure_logging(settings: Settings, level: str) -> None:
    """Send log records to the configured file, if any.

    The terminal is in fullscreen mode while the app runs, so nothing is
    ever logged to the console.
    """
    if settings.log_file is None:
        return
    logging.basicConfig(filename=str(settings.log_file), level=getattr(logging, level),
                        format=LOG_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.version:
        print(get_version_string())
        return 0

    settings = load_settings().with_overrides(texts_dir=args.texts_dir, log_file=args.log_file)
    configure_logging(settings, args.log_level)

    if args.list:
        # Lazy import to avoid importing UI deps for --list
        from .library import TextLibrary
        for name in TextLibrary(settings.texts_dir).list_texts():
            print(name)
        return 0

    from .app import Mnemo
    return Mnemo(settings).run(args.text)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
