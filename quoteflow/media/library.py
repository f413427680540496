# quoteflow/media/library.py
"""
Download library layout for a batch.

Computes where each quote's files belong. Nothing is written to disk.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from quoteflow.models.quotes import MediaAsset, Quote

LIBRARY_FOLDERS = {
    "videos": "videos",
    "voice_tracks": "voice-tracks",
    "background_music": "background-music",
    "raw_quotes": "raw-quotes",
    "exports": "exports",
}


@dataclass
class LibraryFile:
    """Planned file paths for one quote."""

    quote_id: str
    video_file: str
    voice_file: str
    music_file: str
    text_file: str


@dataclass
class LibraryLayout:
    """Folder structure of a batch library."""

    project_name: str
    folders: dict[str, str]
    files: list[LibraryFile] = field(default_factory=list)

    def media_assets(self) -> list[MediaAsset]:
        """One MediaAsset per planned quote, pointing at its library files."""
        return [
            MediaAsset(
                quote_id=f.quote_id,
                video_url=f.video_file,
                voice_url=f.voice_file,
                music_url=f.music_file,
                download_folder=self.project_name,
            )
            for f in self.files
        ]


def folder_name(project_name: str) -> str:
    """Make a batch name usable as a single path segment."""
    cleaned = project_name.strip().replace("/", "-").replace("\\", "-")
    return cleaned or "untitled"


def build_library_layout(project_name: str, quotes: Sequence[Quote] = ()) -> LibraryLayout:
    """
    Plan the library for a batch.

    Files are numbered from 1 in the order the quotes are given.
    """
    root = PurePosixPath(folder_name(project_name))
    folders = {key: f"{root / name}/" for key, name in LIBRARY_FOLDERS.items()}

    files = []
    for index, quote in enumerate(quotes, start=1):
        files.append(
            LibraryFile(
                quote_id=quote.id,
                video_file=str(root / "videos" / f"quote_{index}.mp4"),
                voice_file=str(root / "voice-tracks" / f"voice_{index}.mp3"),
                music_file=str(root / "background-music" / f"music_{index}.mp3"),
                text_file=str(root / "raw-quotes" / f"quote_{index}.txt"),
            )
        )

    return LibraryLayout(project_name=str(root), folders=folders, files=files)
