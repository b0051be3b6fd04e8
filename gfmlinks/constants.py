"""Shared constants for gfmlinks home directory and artefact locations."""

GFMLINKS_HOME_EXT = ".gfmlinks"  # user-level state/config directory suffix

GFMLINKS_HOME_ENV = "GFMLINKS_HOME"

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "gfmlinks.log"

# Host event delivering (editor, change) on every buffer edit
EDITOR_CHANGE_EVENT = "editor-change"
