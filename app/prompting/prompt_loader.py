from pathlib import Path

from app.generation.exceptions import ConfigurationError
from app.logging.logger import Log


def load_prompt_template(path: Path) -> str:
    """Load the scenario prompt template from a file.

    Args:
        path: Path to the template file.

    Returns:
        The raw template string with {{PLACEHOLDER}} tokens.

    Raises:
        ConfigurationError: if the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"Prompt template not found at {path}: create it and paste the full "
            f"prompt into it ({exc})"
        ) from exc


class TemplateStore:
    """Holds the template text read once for the process lifetime.

    Until a read succeeds, every access retries the read so a template added
    after startup is picked up without a restart.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._text: str | None = None

    @property
    def loaded(self) -> bool:
        return self._text is not None

    def preload(self) -> None:
        """Read the template at startup; log instead of failing when missing."""
        try:
            self.get()
        except ConfigurationError as exc:
            Log.error(str(exc))
        else:
            Log.info(f"Loaded prompt template from {self._path}")

    def get(self) -> str:
        if self._text is None:
            self._text = load_prompt_template(self._path)
        return self._text
