APP_ORG = "DarwinSys"
APP_NAME = "TinyPad"

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_LAST_DIR = "file/last_dir"

TEXT_FILTER = "Text (*.txt);;All files (*)"
STATUS_MSEC = 3000
