"""Plain-text loader for uploaded files."""

from rfx_studio.loaders.base import BaseDocumentLoader


class TextFileLoader(BaseDocumentLoader):
    """Reads a file's full contents as text.

    There is no format check: whatever bytes the file holds are decoded as
    UTF-8, with undecodable bytes replaced.
    """

    ENCODING = "utf-8"

    def load(self) -> str:
        content = self.file_path.read_bytes().decode(self.ENCODING, errors="replace")
        self.log_info("File loaded", file=str(self.file_path), chars=len(content))
        return content
