"""
Artifact storage
"""

from .artifact_directory import ArtifactDirectory

__all__ = [
    'ArtifactDirectory'
]
