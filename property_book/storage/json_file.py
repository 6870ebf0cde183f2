"""JSON file storage for the property book."""

import json
from pathlib import Path

from property_book.exceptions import PropertyBookError, StorageError
from property_book.logging import get_logger
from property_book.storage.serialization import book_from_dict, book_to_dict
from property_book.store.book import PropertyBook

logger = get_logger(__name__)


class JsonBookStorage:
    """Read and write a ``PropertyBook`` as a single JSON document."""

    def __init__(self, path: str | Path, pretty: bool = False) -> None:
        """Initialize JSON book storage.

        Parameters
        ----------
        path : str | Path
            Location of the book file.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty

    def load(self) -> PropertyBook | None:
        """Read the book file.

        Returns
        -------
        PropertyBook | None
            The stored book, or ``None`` if the file does not exist.

        Raises
        ------
        StorageError
            If the file cannot be read or holds invalid data.
        """
        if not self.path.exists():
            logger.info("Book file %s not found", self.path)
            return None

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            book = book_from_dict(data)
        except OSError as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        except (KeyError, TypeError, AttributeError, ValueError, PropertyBookError) as exc:
            # json.JSONDecodeError and InvalidFieldError are both ValueErrors
            raise StorageError(f"Invalid book data in {self.path}: {exc}") from exc

        summary = book.summary()
        logger.info(
            "Loaded %d properties and %d buyers from %s",
            summary["properties"],
            summary["buyers"],
            self.path,
        )
        return book

    def save(self, book: PropertyBook) -> None:
        """Write ``book`` to the book file, creating parent directories.

        Raises
        ------
        StorageError
            If the file cannot be written.
        """
        data = book_to_dict(book)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc

        summary = book.summary()
        logger.info(
            "Saved %d properties and %d buyers to %s",
            summary["properties"],
            summary["buyers"],
            self.path,
        )
