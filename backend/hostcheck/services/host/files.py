"""
File reading.
"""


def read_file(path: str) -> str:
    """Return the full contents of a file as text.

    Undecodable bytes survive as surrogate escapes, so
    content.encode("utf-8", "surrogateescape") gives back the exact bytes.
    OSError subclasses (FileNotFoundError, PermissionError,
    IsADirectoryError) propagate to the caller.
    """
    with open(path, "rb") as f:
        data = f.read()
    return data.decode("utf-8", errors="surrogateescape")


def content_bytes(content: str) -> bytes:
    """Inverse of the decoding done by read_file."""
    return content.encode("utf-8", errors="surrogateescape")
