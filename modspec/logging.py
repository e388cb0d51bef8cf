"""Readable log output for validation results.

Failures and reports are Pydantic models; logged through
:class:`PprintLogger` they come out as indented JSON rather than one long
``repr`` line.
"""

import logging
from pprint import pformat
from typing import Any

from pydantic import BaseModel


class PprintLogger:
    """Wraps a ``logging.Logger`` and renders models and containers before logging them."""

    def __init__(self, logger: logging.Logger, indent: int = 2):
        self._logger = logger
        self._indent = indent

    def render(self, msg: Any, pprint: bool = True) -> str:
        """Render ``msg`` as it will appear in the log record.

        Models use ``model_dump_json``; dicts, lists and other containers
        use ``pformat``. With ``pprint=False`` everything goes through ``str()``,
        so a ``Failure`` renders as ``field: message``.
        """
        if not pprint:
            return str(msg)
        if isinstance(msg, BaseModel):
            return msg.model_dump_json(indent=self._indent)
        return pformat(msg, width=120)

    def log(self, level: int, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        kwargs.setdefault("stacklevel", 2)
        self._logger.log(level, self.render(msg, pprint=pprint), *args, **kwargs)

    def info(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self.log(logging.INFO, msg, *args, pprint=pprint, stacklevel=3, **kwargs)

    def warning(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self.log(logging.WARNING, msg, *args, pprint=pprint, stacklevel=3, **kwargs)

    def __getattr__(self, name: str) -> Any:
        """Delegate any other attributes to the underlying logger."""
        return getattr(self._logger, name)
