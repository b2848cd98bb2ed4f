"""
utils.py

Small logging helpers shared by the codec and the column operators.

The public helpers:
- `log_failure(msg, exc, **ctx)` : DEBUG record of a low-level failure,
  with row context, written just before the caller raises its typed error
- `count_missing(buffer)` : number of null cells in an output buffer
"""

from typing import Any
import logging

logger = logging.getLogger(__name__)


def log_failure(msg: str, exc: BaseException, **ctx: Any) -> None:
	"""Record ``exc`` at DEBUG, traceback attached, context as ``key=value``."""
	if not logger.isEnabledFor(logging.DEBUG):
		return
	context = ' '.join(f"{k}={v!r}" for k, v in ctx.items())
	logger.debug('%s [%s]', msg, context, exc_info=exc)


def count_missing(buffer) -> int:
	"""Return how many cells of ``buffer`` are ``None``."""
	return sum(1 for value in buffer if value is None)
