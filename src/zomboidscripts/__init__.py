"""zomboid-scripts: locate a Project Zomboid install and load its scripts into memory."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

GAME_DIR_NAME = "ProjectZomboid"
MEDIA_DIR_NAME = "media"
SCRIPTS_DIR_NAME = "scripts"
