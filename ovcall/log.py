from collections.abc import MutableMapping
from typing import Any
import os
import logging

def getLevel(name: str) -> str | int | None:
    """
    Level of a logger from ``LOGGER_<NAME>_LEVEL``, falling back to ``LOGGER_OVCALL_LEVEL`` then ``LOGGER_LEVEL``.
    ``ovcall[participant]`` reads ``LOGGER_OVCALL_PARTICIPANT_LEVEL``.
    """
    key = ''.join(c if c.isalnum() else '_' for c in name.upper()).strip('_')
    level = os.environ.get(f'LOGGER_{key}_LEVEL') or os.environ.get('LOGGER_OVCALL_LEVEL', default=os.environ.get('LOGGER_LEVEL'))
    if level and level.isdigit():
        return int(level)
    return level.upper() if level else None

def configLogger(logger: logging.Logger) -> logging.Logger:
    level = getLevel(logger.name)
    if level is not None:
        logger.setLevel(level)
    return logger
    

class PrefixLoggerAdapter(logging.LoggerAdapter):
    
    prefix: str
    
    def __init__(self, logger: logging.Logger, prefix: str) -> None:
        super().__init__(logger, {})
        self.prefix = prefix
        
    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        return f'{self.prefix}{msg}', kwargs
