import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(funcName)s  - %(message)s"


def initialize_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    enable_file_writing = os.getenv("ENABLE_FILE_WRITING", "false").lower() == "true"
    if enable_file_writing:
        os.makedirs("logs", exist_ok=True)
        handlers.append(logging.FileHandler("logs/latest.log", mode="w"))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)
    logging.getLogger(__name__).info("Logging initialized")
