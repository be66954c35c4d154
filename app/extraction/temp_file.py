import os
import tempfile
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from app.logging.logger import Log


@contextmanager
def staged_temp_file(content: bytes, suffix: str) -> Generator[Path, None, None]:
    """Write content to a uniquely named temp file and delete it on exit.

    Deletion failures are logged and never propagated.
    """
    path = Path(tempfile.gettempdir()) / f"upload-{uuid.uuid4()}{suffix}"
    path.write_bytes(content)
    try:
        yield path
    finally:
        try:
            os.remove(path)
        except OSError as exc:
            Log.warning(f"Failed to remove temp file {path}: {exc}")
