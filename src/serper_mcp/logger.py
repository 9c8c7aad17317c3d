import logging, datetime
from logging.config import dictConfig

# logfmt encoder
def lf_encode(d: dict) -> str:
    def esc(v: str) -> str:
        s = str(v)
        if any(ch in s for ch in (' ', '"', '=')):
            s = s.replace('"', r'\"')
            return f'"{s}"'
        return s
    return ' '.join(f'{k}={esc(v)}' for k, v in d.items())

STD_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname",
    "filename", "module", "exc_info", "exc_text", "stack_info",
    "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "taskName",
    "message", "asctime", "color_message",
}

class LeanLogfmt(logging.Formatter):
    CORE = ("ts", "level", "logger", "msg")

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.datetime.fromtimestamp(record.created, tz=datetime.timezone.utc)
                      .strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Copy ONLY user-supplied extras
        for k, v in record.__dict__.items():
            if k not in STD_ATTRS and not k.startswith("_"):
                base[k] = v

        line = lf_encode(base)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

def build_logging_config(level: str = "info") -> dict:
    """
    dictConfig for the server and uvicorn. Everything goes to stderr so the
    stdio transport keeps stdout for protocol messages.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"lean": {"()": LeanLogfmt}},
        "handlers": {"console": {"class": "logging.StreamHandler",
                                 "formatter": "lean",
                                 "stream": "ext://sys.stderr"}},
        "root": {"level": "WARNING", "handlers": ["console"]},
        "loggers": {
            "uvicorn.access": {"level": level, "handlers": ["console"],
                               "propagate": False},
            "uvicorn.error":  {"level": level, "handlers": ["console"],
                               "propagate": False},
            "serper_mcp":     {"level": level, "handlers": ["console"],
                               "propagate": False},
        },
    }

def configure_logging(level: str = "info") -> None:
    dictConfig(build_logging_config(level))

log = logging.getLogger("serper_mcp")
