import sys
from datetime import datetime

from config import LOG_LEVEL


class Logger:
    PREFIX = {
        "info": "",
        "warn": "⚠️ ",
        "error": "❌ ",
        "success": "✅ ",
        "debug": "🔍 "
    }

    ORDER = {
        "debug": 0,
        "info": 1,
        "success": 2,
        "warn": 3,
        "error": 4,
    }

    level = LOG_LEVEL

    @staticmethod
    def ts():
        return datetime.now().strftime('%H:%M:%S.%f')[:-3]

    @staticmethod
    def enabled(level):
        threshold = Logger.ORDER.get(Logger.level, Logger.ORDER["warn"])
        return Logger.ORDER.get(level, 0) >= threshold

    @staticmethod
    def log(level, msg):
        # stdout занят выводом операций
        if not Logger.enabled(level):
            return
        prefix = Logger.PREFIX.get(level, "")
        print(f"[{Logger.ts()}] {prefix}{msg}", file=sys.stderr)

    @staticmethod
    def info(msg):    Logger.log("info", msg)
    @staticmethod
    def warn(msg):    Logger.log("warn", msg)
    @staticmethod
    def error(msg):   Logger.log("error", msg)
    @staticmethod
    def success(msg): Logger.log("success", msg)
    @staticmethod
    def debug(msg):   Logger.log("debug", msg)
