import logging
import shutil
from pathlib import Path
from typing import List, Tuple

import aiofiles
from PIL import Image

logger = logging.getLogger(__name__)


class ArtifactDirectory:
    """Read-only view over the files an action produced"""

    def __init__(self, path):
        self.path = Path(path)
        if not self.path.is_dir():
            raise FileNotFoundError(f"Artifact directory does not exist: {self.path}")

    def _files(self) -> List[Path]:
        return [p for p in self.path.iterdir() if p.is_file()]

    def names(self) -> List[str]:
        """File names in creation order (modification time, then name)"""
        files = self._files()
        files.sort(key=lambda p: (p.stat().st_mtime_ns, p.name))
        return [p.name for p in files]

    def __contains__(self, name: str) -> bool:
        return (self.path / name).is_file()

    def __len__(self) -> int:
        return len(self._files())

    def file_path(self, name: str) -> Path:
        path = self.path / name
        if not path.is_file():
            raise FileNotFoundError(f"No artifact named {name} in {self.path}")
        return path

    async def read_bytes(self, name: str) -> bytes:
        """Read an artifact's contents"""
        async with aiofiles.open(self.file_path(name), 'rb') as f:
            return await f.read()

    def image_size(self, name: str) -> Tuple[int, int]:
        """(width, height) of an image artifact"""
        with Image.open(self.file_path(name)) as image:
            return image.size

    def copy_to(self, destination) -> Path:
        """Copy every artifact into destination, which is created if needed"""
        destination = Path(destination)
        destination.mkdir(parents=True, exist_ok=True)
        for path in self._files():
            shutil.copy2(path, destination / path.name)

        logger.info(f"Copied {len(self)} artifact(s) to {destination}")
        return destination

    def get_storage_stats(self):
        """File count and size of the directory"""
        total_size = sum(p.stat().st_size for p in self._files())
        return {
            'file_count': len(self),
            'total_size_mb': round(total_size / (1024 * 1024), 2)
        }

    def __repr__(self):
        return f"ArtifactDirectory({str(self.path)!r})"
