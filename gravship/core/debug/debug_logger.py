"""
debug_logger.py
---------------
Diagnostic console logger with category filtering and formatted output.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Boot
        "system": True,
        "loading": True,
        "display": True,
        "input": False,

        # Entities
        "entity_spawn": False,
        "entity_cleanup": False,
        "pool": True,

        # Frame loop
        "render": True,
        "timing": False,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger with category filtering and colored output."""

    LINE_LENGTH = 59

    # tag -> (color, level)
    TAGS = {
        "INIT": (Colors.WHITE, "INFO"),
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4
    }

    # ===========================================================
    # Caller Detection
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name the class (or module, in PascalCase) that issued the log call."""
        try:
            # _get_caller <- _log <- public method <- caller
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        if "cls" in local_vars and isinstance(local_vars["cls"], type):
            return local_vars["cls"].__name__

        filename = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        module_name = filename[:-3] if filename.endswith(".py") else filename
        return "".join(part.capitalize() for part in module_name.split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        """Check if message should be logged based on config."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        level_val = DebugLogger.LEVEL_VALUES.get(level, 3)
        config_val = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return level_val <= config_val

    @staticmethod
    def _log(tag: str, message: str, category: str = "system", meta_mode: str = "full"):
        """Format and print one log line if its category and level are enabled."""
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger._should_log(category, level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        prefix = DebugLogger._build_prefix(timestamp, source, tag, meta_mode)
        print(f"{color}{prefix}{message}{Colors.RESET}")

    @staticmethod
    def _build_prefix(timestamp: str, source: str, tag: str, meta_mode: str) -> str:
        """Build log line prefix based on meta mode."""
        if meta_mode == "none":
            return ""
        if meta_mode == "time":
            return f"[{timestamp}] "
        if meta_mode == "no_time":
            return f"[{source}][{tag}] "
        return f"[{timestamp}] [{source}][{tag}] "

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system", meta_mode: str = "full"):
        """Initialization log. Empty message prints blank line."""
        if not msg.strip():
            print()
            return
        DebugLogger._log("INIT", msg, category, meta_mode)

    @staticmethod
    def system(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._log("SYSTEM", msg, category, meta_mode)

    @staticmethod
    def state(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._log("STATE", msg, category, meta_mode)

    @staticmethod
    def action(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._log("ACTION", msg, category, meta_mode)

    @staticmethod
    def trace(msg: str, category: str = "render", meta_mode: str = "full"):
        """Verbose trace log, silent unless LOG_LEVEL is VERBOSE."""
        DebugLogger._log("TRACE", msg, category, meta_mode)

    @staticmethod
    def warn(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._log("WARN", msg, category, meta_mode)

    @staticmethod
    def fail(msg: str, category: str = "system", meta_mode: str = "full"):
        DebugLogger._log("FAIL", msg, category, meta_mode)

    # ===========================================================
    # Boot Report Formatting
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a centered section header between rules."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted '> Module ....... [OK]' boot entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        status_color = {
            "OK": Colors.GREEN,
            "LOADING": Colors.CYAN,
            "FAIL": Colors.RED,
        }.get(status.upper(), Colors.WHITE)

        prefix = f"> {module}"
        status_str = f"[{status}]"
        pad = max(30 - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - pad - 1 - len(status_str), 1)
        print(f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} {status_color}{status_str}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print indented sub-detail under the last boot entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")
