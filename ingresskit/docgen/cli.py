"""Command that renders the documentation pages from the description file."""

from __future__ import annotations

import argparse
import os
import tempfile
from pathlib import Path
from typing import Sequence

from ..log import get_logger
from .controller import generate_controller_readme
from .readme import generate_readme
from .types import DOC_PATH, ConfError, load_conf


def _write_atomic(path: Path, text: str) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


def main(argv: Sequence[str] | None = None) -> int:
    """Write README.md and controller.md; returns the exit status."""
    parser = argparse.ArgumentParser(prog="ingresskit-docgen", description=__doc__)
    parser.add_argument("--doc", default=DOC_PATH, help="description file to read")
    parser.add_argument("--output-dir", default="..", help="directory to write pages into")
    args = parser.parse_args(argv)

    logger = get_logger()
    try:
        conf = load_conf(args.doc)
    except ConfError as exc:
        logger.print(exc)
        return 1

    out_dir = Path(args.output_dir)
    pages = (
        ("README.md", generate_readme(conf)),
        ("controller.md", generate_controller_readme(conf)),
    )
    for name, text in pages:
        try:
            _write_atomic(out_dir / name, text)
        except OSError as exc:
            logger.print(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())