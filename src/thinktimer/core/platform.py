"""Open paths and URLs with the platform's default handler.

Both helpers start the child process and return without waiting for it.
"""

import subprocess
import sys

from src.thinktimer.core.logging import get_logger

logger = get_logger(__name__)

# Hides the console window that would otherwise flash up on Windows.
CREATE_NO_WINDOW = 0x08000000


def _launch(args: list[str], platform: str) -> subprocess.Popen:
    kwargs: dict = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
    }
    if platform.startswith("win"):
        kwargs["creationflags"] = CREATE_NO_WINDOW
    logger.debug("Launching", command=args[0])
    return subprocess.Popen(args, **kwargs)


def open_directory_command(path: str, platform: str = sys.platform) -> list[str]:
    if platform.startswith("win"):
        return ["explorer", path]
    if platform == "darwin":
        return ["open", path]
    return ["xdg-open", path]


def open_url_command(url: str, platform: str = sys.platform) -> list[str]:
    if platform.startswith("win"):
        # "start" goes through the shell so custom protocol handlers resolve
        return ["cmd", "/c", "start", "", url]
    if platform == "darwin":
        return ["open", url]
    return ["xdg-open", url]


def open_directory(path: str, platform: str = sys.platform) -> subprocess.Popen | None:
    """Open a filesystem path in the file explorer. Empty path is a no-op."""
    if not path:
        return None
    return _launch(open_directory_command(path, platform), platform)


def open_url(url: str, platform: str = sys.platform) -> subprocess.Popen | None:
    """Open a URL with the default handler. Empty URL is a no-op."""
    if not url:
        return None
    return _launch(open_url_command(url, platform), platform)
