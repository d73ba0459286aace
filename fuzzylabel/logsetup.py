"""Konfiguracja loggera pakietu (CLI i aplikacje osadzające bibliotekę)."""

import logging

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Ustawia poziom loggera 'fuzzylabel' i (raz) dokłada StreamHandler na stderr.
    Biblioteka sama niczego nie konfiguruje; robi to dopiero CLI (main).
    """
    logger = logging.getLogger("fuzzylabel")
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
