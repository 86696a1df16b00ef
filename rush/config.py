import os

PROMPT = "rush> "

# Every error condition is reported with this exact string.
ERROR_MESSAGE = "An error has occurred\n"

DEFAULT_PATH = ["/bin"]

DELIMITERS = " \t\n"
PARALLEL_SEPARATOR = "&"
REDIRECT_TOKEN = ">"
REDIRECT_MODE = 0o644

HISTORY_FILE = os.path.expanduser(os.getenv("RUSH_HISTORY_FILE", "~/.rush_history"))
MAX_HISTORY = 1000

# "all": block until the interpreter has no children left.
# "group": block only on the handles launched by the current line.
WAIT_POLICIES = ("all", "group")
WAIT_POLICY = os.getenv("RUSH_WAIT_POLICY", "all")

LOG_FILE = os.getenv("RUSH_LOG_FILE")
LOG_LEVEL = os.getenv("RUSH_LOG_LEVEL", "DEBUG")
