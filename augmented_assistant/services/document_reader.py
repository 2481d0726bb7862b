import logging
from fastapi import UploadFile

logger = logging.getLogger(__name__)


class DocumentReadError(ValueError):
    """Raised when an uploaded document cannot be used as plain text."""
    pass


class DocumentReader:
    def __init__(self, encoding: str = "utf-8-sig"):
        self.encoding = encoding

    def _check_type(self, file: UploadFile) -> None:
        content_type = file.content_type
        if content_type and not content_type.startswith("text/"):
            logger.warning(f"Rejected upload {file.filename}: content type {content_type}")
            raise DocumentReadError("Please upload a plain text file (.txt, .md, etc.).")

    def _decode(self, file: UploadFile, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.warning(f"Rejected upload {file.filename}: not valid text")
            raise DocumentReadError(f"Could not read {file.filename} as text.") from e

    def run(self, file: UploadFile) -> str:
        """
        Read an uploaded document in full.

        Args:
            file (UploadFile): The uploaded file.

        Returns:
            str: The document text, unchanged apart from a leading byte order mark.

        Raises:
            DocumentReadError: If the file is not a text file or cannot be decoded.
        """
        self._check_type(file)
        try:
            raw = file.file.read()
        except OSError as e:
            logger.error(f"Failed to read upload {file.filename}: {e}")
            raise DocumentReadError(f"Could not read {file.filename}.") from e

        text = self._decode(file, raw)
        logger.info(f"Read document {file.filename}: {len(text)} characters")
        return text
