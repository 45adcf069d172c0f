from __future__ import annotations

import shutil
import subprocess

from blogsum.client.errors import ClipboardError

# First available command wins.
_CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def copy_to_system_clipboard(text: str) -> None:
    for command in _CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        try:
            subprocess.run(command, input=text, text=True, check=True, timeout=5)
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as exc:
            raise ClipboardError(f"{command[0]} failed: {exc}") from exc
        return
    raise ClipboardError("No clipboard command available.")
