"""
Clipboard Service - Copies the rendered result to the system clipboard.

The actual clipboard access lives in the UI layer; it hands us a primary
writer and optionally one fallback writer (e.g. a text-selection based
copy). Failures are reported back, never raised, and never retried.
"""

import logging
from typing import Callable, Optional

from timecalc.domain.models import CopyResult

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], None]


def copy_text(text: str, primary: ClipboardWriter,
              fallback: Optional[ClipboardWriter] = None) -> CopyResult:
    """
    Try the primary writer, then the fallback writer once.

    Args:
        text: Text to copy
        primary: Preferred clipboard writer
        fallback: Writer to try if the primary one raises

    Returns:
        CopyResult describing which writer succeeded, or the last error
    """
    try:
        primary(text)
        return CopyResult(success=True, method="primary")
    except Exception as e:
        logger.warning(f"Primary clipboard write failed: {e}")
        error = str(e)

    if fallback is None:
        return CopyResult(success=False, error=error)

    try:
        fallback(text)
        return CopyResult(success=True, method="fallback")
    except Exception as e:
        logger.warning(f"Fallback clipboard write failed: {e}")
        return CopyResult(success=False, error=str(e))
