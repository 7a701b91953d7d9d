"""Settings controlling where generated voice assets are placed."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AssetLocation(Enum):
    """Where generated assets go relative to shared or script directories."""

    SHARED_DIRECTORY = "SharedDirectory"
    SHARED_DIRECTORY_SUBDIR = "SharedDirectorySubdir"
    SCRIPT_DIRECTORY = "ScriptDirectory"
    SCRIPT_DIRECTORY_SUBDIR = "ScriptDirectorySubdir"


def _combine(base: str, part: str) -> str:
    if not base:
        return part
    if not part:
        return base
    return base.rstrip("/") + "/" + part.lstrip("/")


def _is_under_directory(path: str, directory: str) -> bool:
    path_norm = path.rstrip("/").lower()
    dir_norm = directory.rstrip("/").lower()
    return path_norm == dir_norm or path_norm.startswith(dir_norm + "/")


def output_dir(location: AssetLocation, shared_path: str, package_path: str, script_name: str) -> str:
    """The directory that assets for a script go into."""
    if location is AssetLocation.SHARED_DIRECTORY_SUBDIR:
        return _combine(shared_path, script_name)
    if location is AssetLocation.SCRIPT_DIRECTORY:
        return package_path
    if location is AssetLocation.SCRIPT_DIRECTORY_SUBDIR:
        return _combine(package_path, script_name)
    return shared_path


@dataclass
class EditorSettings:
    """Voice-over asset generation settings."""

    always_auto_generate_voice_assets: bool = False
    auto_generate_voice_asset_dirs: list[str] = field(default_factory=list)
    voice_asset_location: AssetLocation = AssetLocation.SHARED_DIRECTORY
    voice_asset_shared_dir: str = "/Game"
    wave_asset_location: AssetLocation = AssetLocation.SCRIPT_DIRECTORY_SUBDIR
    wave_asset_shared_dir: str = "/Game"

    def should_generate_voice_assets(self, package_path: str) -> bool:
        if self.always_auto_generate_voice_assets:
            return True
        return any(_is_under_directory(package_path, d) for d in self.auto_generate_voice_asset_dirs)

    def voice_output_dir(self, package_path: str, script_name: str) -> str:
        return output_dir(self.voice_asset_location, self.voice_asset_shared_dir, package_path, script_name)

    def wave_output_dir(self, package_path: str, script_name: str) -> str:
        return output_dir(self.wave_asset_location, self.wave_asset_shared_dir, package_path, script_name)