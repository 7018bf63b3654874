"""File helpers shared by the validator, the renderer and the CLI."""

from pathlib import Path
from ..exceptions import MissingDirectory


def is_file_valid(file_path: str | Path) -> bool:
    """Check that the path exists and is a file rather than a directory."""
    path = Path(file_path)

    return path.exists() and not path.is_dir()


def check_dir(file_path: str | Path) -> None:
    """
    Make sure the directory that should contain an output file exists.

    Args:
        file_path: Intended output file

    Raises:
        MissingDirectory: If the containing directory does not exist
    """
    directory = Path(file_path).parent

    if not directory.is_dir():
        raise MissingDirectory(
            f'The directory of specified output file ({directory}) does not exist.'
        )


def is_markdown_target(file_path: str | Path) -> bool:
    """True when the output should be Markdown (.md, any case), False for CSV."""
    return Path(file_path).suffix.lower() == '.md'
