"""Reading texts from the texts directory."""

import logging
from pathlib import Path
from typing import Union

from .errors import TextNotFoundError
from .model import Text

logger = logging.getLogger(__name__)

TEXT_SUFFIX = ".txt"


class TextLibrary:
    """A directory of ``<name>.txt`` files, one text per file."""

    def __init__(self, texts_dir: Union[str, Path]):
        self.texts_dir = Path(texts_dir)

    def path_for(self, name: str) -> Path:
        return self.texts_dir / f"{name}{TEXT_SUFFIX}"

    def list_texts(self) -> list[str]:
        """Return the names of available texts, sorted.

        A missing texts directory simply has no texts.
        """
        if not self.texts_dir.is_dir():
            logger.info(f"Texts directory {self.texts_dir} does not exist")
            return []
        return sorted(p.stem for p in self.texts_dir.glob(f"*{TEXT_SUFFIX}") if p.is_file())

    def load(self, name: str) -> Text:
        """Load and parse a text by name.

        Raises:
            TextNotFoundError: if the file is missing or cannot be read.
        """
        path = self.path_for(name)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read text {name!r} from {path}: {e}")
            raise TextNotFoundError(name, str(path)) from e
        text = Text.parse(content)
        logger.info(f"Read text {name!r}: {text.line_count} lines")
        return text
