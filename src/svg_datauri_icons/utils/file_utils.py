"""File system helpers for the SVG data-URI icon helpers.

Provides the small set of file operations the CLI and loaders need: reading
configuration, manifests and templates, and writing generated stylesheets.
"""

from pathlib import Path

# Type aliases for clarity and documentation
PathLike = str | Path


def normalize_path(path: PathLike) -> Path:
    """Convert a string path to a Path object, expanding ``~``.

    Args:
        path: String or Path object

    Returns:
        A Path object.
    """
    return (Path(path) if isinstance(path, str) else path).expanduser()


def read_text(file_path: PathLike) -> str:
    """Read text content from a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The text content of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
        UnicodeDecodeError: If the file content cannot be decoded as text
    """
    normalized_path = normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return f.read()


def write_text(file_path: PathLike, content: str, make_dirs: bool = True) -> None:
    """Write text content to a file.

    Args:
        file_path: Path to the file (string or Path object)
        content: Text content to write
        make_dirs: Whether to create parent directories if they don't exist

    Raises:
        FileNotFoundError: If the parent directory does not exist and make_dirs is False
        PermissionError: If the file cannot be written due to permissions
    """
    normalized_path = normalize_path(file_path)

    if make_dirs:
        ensure_dir_exists(normalized_path.parent)

    with open(normalized_path, "w", encoding="utf-8") as f:
        f.write(content)


def ensure_dir_exists(dir_path: PathLike) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        dir_path: Directory path (string or Path object)

    Returns:
        Path to the directory
    """
    path = normalize_path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def file_exists(file_path: PathLike) -> bool:
    """Check if a file exists.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        True if the file exists, False otherwise
    """
    normalized_path = normalize_path(file_path)
    return normalized_path.exists() and normalized_path.is_file()
