"""Markdown source discovery and reading for the CLI"""

from pathlib import Path

import typer


MD_EXTENSIONS = {'.md', '.mdx'}
STDIN = '-'


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def read_sources(target: str) -> list[tuple[str, str]]:
    """Return (label, markdown) pairs for a file, a directory, or '-' for stdin.

    Raises FileNotFoundError for a missing path and ValueError for undecodable input.
    """
    if target == STDIN:
        return [("<stdin>", typer.get_text_stream("stdin").read())]

    path = Path(target)
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {target}")

    sources = []
    for p in discover_files(path):
        try:
            sources.append((str(p), p.read_text(encoding='utf-8')))
        except UnicodeDecodeError as e:
            raise ValueError(f"{p} is not valid UTF-8: {e.reason}") from e
    return sources
