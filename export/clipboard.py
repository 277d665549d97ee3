"""
Best-effort clipboard writes.

The platform clipboard command is tried first; if it is missing or fails,
a hidden Tk window's clipboard is used instead. Callers only get a success
flag, never an exception.
"""

import logging
import os
import shutil
import subprocess
import sys
from typing import Callable, List, Optional, Sequence

ClipboardWriter = Callable[[str], None]


class ClipboardUnavailableError(RuntimeError):
    """No clipboard mechanism could be used."""


def _clipboard_command() -> Optional[List[str]]:
    if sys.platform == 'darwin':
        candidates = [['pbcopy']]
    elif sys.platform.startswith('win'):
        candidates = [['clip']]
    else:
        candidates = [['xclip', '-selection', 'clipboard'], ['xsel', '--clipboard', '--input']]
        if os.environ.get('WAYLAND_DISPLAY'):
            candidates.insert(0, ['wl-copy'])

    for command in candidates:
        if shutil.which(command[0]):
            return command
    return None


def system_clipboard_write(text: str) -> None:
    """Pipe text into the platform clipboard command."""
    command = _clipboard_command()
    if command is None:
        raise ClipboardUnavailableError("No clipboard command found on PATH")
    subprocess.run(command, input=text.encode('utf-8'), check=True, timeout=5)


def tk_clipboard_write(text: str) -> None:
    """Copy through a withdrawn Tk root window."""
    try:
        import tkinter
    except ImportError as e:
        raise ClipboardUnavailableError(f"tkinter not available: {e}")

    try:
        root = tkinter.Tk()
    except tkinter.TclError as e:
        raise ClipboardUnavailableError(f"No display for Tk clipboard: {e}")

    try:
        root.withdraw()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
    finally:
        root.destroy()


DEFAULT_WRITERS: Sequence[ClipboardWriter] = (system_clipboard_write, tk_clipboard_write)


def copy_to_clipboard(text: str, writers: Optional[Sequence[ClipboardWriter]] = None) -> bool:
    """
    Copy text to the clipboard.

    Args:
        text: Content to copy
        writers: Mechanisms to try in order (defaults to system command, then Tk)

    Returns:
        True if any mechanism succeeded, False otherwise
    """
    for writer in writers or DEFAULT_WRITERS:
        try:
            writer(text)
            return True
        except Exception as e:
            logging.debug(f"Clipboard writer {getattr(writer, '__name__', writer)} failed: {e}")

    logging.error("Copy failed: no clipboard mechanism succeeded")
    return False
