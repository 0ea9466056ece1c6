import logging, os, sys

# third-party loggers that are too chatty below INFO
NOISY_LOGGERS = ("aiosqlite", "aiogram.event")

def setup_logging(level_name: str | None = None):
    level_name = (level_name or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger()
    if not getattr(setup_logging, "_configured", False):
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
        root.handlers[:] = [h]
        setup_logging._configured = True
    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))
