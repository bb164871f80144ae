import json, logging, socket, sys, time
from logging.handlers import RotatingFileHandler

# attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


# ---------- Formatters ----------
class JsonFormatter(logging.Formatter):
    """One JSON object per line: app/host context, the message, extras, traceback."""
    def __init__(self, *, app: str):
        super().__init__()
        self.context = {"app": app, "host": socket.gethostname()}

    def format(self, record: logging.LogRecord) -> str:
        doc = {
            "ts": time.strftime('%Y-%m-%dT%H:%M:%S', time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "thread": record.threadName,
            "where": f"{record.filename}:{record.lineno}",
            **self.context,
        }
        doc.update(
            (k, v) for k, v in record.__dict__.items()
            if k not in _RECORD_ATTRS and not k.startswith("_")
        )
        if record.exc_info:
            doc["exc_info"] = self.formatException(record.exc_info)

        # change records carry arbitrary values
        return json.dumps(doc, ensure_ascii=False, default=repr)


class TextFormatter(logging.Formatter):
    """Single line for terminals and log files."""
    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)-8.8s] [%(filename)s:%(lineno)d] %(message)s")


def _parse_level(val: str | int) -> int:
    if isinstance(val, int):
        return val
    return getattr(logging, val.upper(), logging.INFO)


def setup_logging(
    *,
    app: str,
    level: str | int,
    stream_json: bool,
    filename: str | None = None,
    file_json: bool = False,
    max_bytes: int = 1024 * 1024,
    backups: int = 3,
) -> logging.Logger:
    """
    Point the root logger at stdout and, when `filename` is set, a rotating file.
    Call once at process start; library modules only emit records.
    """
    lvl = _parse_level(level)
    root = logging.getLogger()

    # Clear existing handlers to avoid duplicates on re-init
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(lvl)

    def _formatter(as_json: bool) -> logging.Formatter:
        return JsonFormatter(app=app) if as_json else TextFormatter()

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(_formatter(stream_json))
    root.addHandler(sh)

    if filename:
        fh = RotatingFileHandler(filename, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
        fh.setFormatter(_formatter(file_json))
        root.addHandler(fh)

    return root
