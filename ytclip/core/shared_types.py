from dataclasses import dataclass
from pathlib import Path

MP4_COMPATIBLE_SUFFIXES = {".mp4", ".m4v", ".mov"}

@dataclass(frozen=True)
class MediaFile:
    """
    Entity representing a media file on the filesystem.
    Encapsulates path validation and directory creation.
    """
    path: Path

    def __post_init__(self):
        if str(self.path).strip() == "." or str(self.path).strip() == "":
             raise ValueError("File path cannot be empty.")

    def exists(self) -> bool:
        return self.path.exists()

    def ensure_parent_dir(self) -> None:
        """Creates the directory structure for this file if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def with_mp4_container(self) -> "MediaFile":
        """
        Returns this file unchanged when its suffix is an MP4-family container,
        otherwise a copy with '.mp4' appended (clip -> clip.mp4, clip.avi -> clip.avi.mp4).
        """
        if self.path.suffix.lower() in MP4_COMPATIBLE_SUFFIXES:
            return self
        return MediaFile(self.path.with_name(self.path.name + ".mp4"))

    def discard(self) -> None:
        """Removes the file and any sibling leftovers sharing its name as prefix."""
        parent = self.path.parent
        if not parent.exists():
            return
        for leftover in parent.iterdir():
            if leftover.name.startswith(self.path.name) and leftover.is_file():
                leftover.unlink()
