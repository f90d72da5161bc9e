import logging


class ProfessionalFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(shortlevel)-3s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        self.shortmap = {
            "DEBUG": "DBG",
            "INFO": "INF",
            "WARNING": "WRN",
            "ERROR": "ERR",
            "CRITICAL": "CRT",
        }

    def format(self, record) -> str:
        record.shortlevel = self.shortmap.get(record.levelname, "???")
        return super().format(record)


def configure_logging(level=logging.WARNING) -> logging.Logger:
    """Install the formatter on the root logger once and set its level."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ProfessionalFormatter())
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return root_logger
