import logging
import os
import random

from tree_hazard.config.settings import UPLOADS_URL_PREFIX

logger = logging.getLogger(__name__)


class UploadStorage:
    """Guarda las fotos subidas en una carpeta del disco."""

    def __init__(self, directory: str, url_prefix: str = UPLOADS_URL_PREFIX):
        self.directory = directory
        self.url_prefix = url_prefix.rstrip("/")

    def generate_filename(self, original_name: str, timestamp: int) -> str:
        """Nombre único: "<timestamp>-<aleatorio><extensión original>"."""
        extension = os.path.splitext(os.path.basename(original_name or ""))[1]
        return f"{timestamp}-{random.randint(0, 10**9)}{extension}"

    def save(self, original_name: str, content: bytes, timestamp: int) -> str:
        os.makedirs(self.directory, exist_ok=True)
        filename = self.generate_filename(original_name, timestamp)
        with open(self.path_for(filename), "wb") as f:
            f.write(content)
        logger.info("Foto guardada: %s (%d bytes)", filename, len(content))
        return filename

    def remove(self, filename: str) -> None:
        path = self.path_for(filename)
        if os.path.exists(path):
            os.remove(path)
            logger.info("Foto eliminada: %s", filename)

    def path_for(self, filename: str) -> str:
        return os.path.join(self.directory, filename)

    def url_for(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"
