APP_ORG = "OopsEditor"
APP_NAME = "Caffeine Text Editor"

TITLE_PREFIX = f"{APP_NAME} - "
UNTITLED = "Untitled"

TEXT_SUFFIX = ".txt"
TEXT_FILE_FILTER = "Text Files (*.txt);;All Files (*)"

DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 700
MIN_WINDOW_SIZE = 200

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
