import os

import pytest
from PIL import Image

from pagecap.storage import ArtifactDirectory


@pytest.fixture
def artifacts(tmp_path):
    for offset, name in enumerate(["before-submit.png", "after-submit.png"]):
        path = tmp_path / name
        Image.new('RGB', (32, 16)).save(path)
        os.utime(path, ns=(1_000_000_000 + offset, 1_000_000_000 + offset))
    return ArtifactDirectory(tmp_path)


class TestArtifactDirectory:
    """Test cases for ArtifactDirectory"""

    def test_names_in_creation_order(self, artifacts):
        assert artifacts.names() == ["before-submit.png", "after-submit.png"]
        assert len(artifacts) == 2
        assert "after-submit.png" in artifacts

    def test_image_size(self, artifacts):
        assert artifacts.image_size("before-submit.png") == (32, 16)

    @pytest.mark.asyncio
    async def test_read_bytes(self, artifacts):
        data = await artifacts.read_bytes("after-submit.png")
        assert data.startswith(b"\x89PNG")

    def test_copy_to(self, artifacts, tmp_path):
        destination = artifacts.copy_to(tmp_path / "export")
        assert sorted(p.name for p in destination.iterdir()) == ["after-submit.png", "before-submit.png"]

    def test_missing(self, artifacts, tmp_path):
        with pytest.raises(FileNotFoundError):
            artifacts.file_path("screenshot.png")
        with pytest.raises(FileNotFoundError):
            ArtifactDirectory(tmp_path / "nope")
