"""Game settings: where data lives, which levels exist, tile geometry."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent  # sorting-hat/
DATA_DIR = PROJECT_ROOT / "data"
SETTINGS_FILE = "settings.json"

TILE_WIDTH = 60
TILE_HEIGHT = 60
NORTH_PANEL_HEIGHT = 100


@dataclass
class Settings:
    data_dir: Path = DATA_DIR
    player_record_file: str = "player_record.bin"
    level_options: list[str] = field(default_factory=list)
    tile_width: int = TILE_WIDTH
    tile_height: int = TILE_HEIGHT
    north_panel_height: int = NORTH_PANEL_HEIGHT

    @property
    def record_path(self) -> Path:
        return self.data_dir / self.player_record_file

    def level_path(self, identifier: str) -> Path:
        return self.data_dir / identifier


def load_settings(data_dir: Path = DATA_DIR) -> Settings:
    """Read ``settings.json`` from *data_dir*.

    A missing file gives the defaults. Unknown keys raise ``ValueError``.
    """
    path = data_dir / SETTINGS_FILE
    if not path.exists():
        return Settings(data_dir=data_dir)

    data = json.loads(path.read_text())
    known = {f.name for f in fields(Settings)} - {"data_dir"}
    unknown = set(data) - known
    if unknown:
        raise ValueError(
            f"Unknown settings in {path}: {', '.join(sorted(unknown))}"
        )
    return Settings(data_dir=data_dir, **data)
