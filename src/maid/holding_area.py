"""
Holding area for discarded files.

Discarded files are moved (never deleted) into a timestamped directory
``maid-trash-bin-<YYYYmmdd_HHMMSS>`` under the configured trash root. The
directory is created on the first move only.

Expiry of the holding area belongs to an EphemeralStorage implementation.
The default one writes a ``self_destruct.sh`` script into the holding area and
opens it in a new terminal; closing that terminal removes the directory. It
is best-effort: a failure to spawn the terminal is logged and ignored.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import stat
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from .activity_log import ActivityLog
from .exceptions import HoldingAreaError
from .io_utils import unique_destination

logger = logging.getLogger(__name__)

HOLDING_AREA_PREFIX = "maid-trash-bin-"
SELF_DESTRUCT_SCRIPT = "self_destruct.sh"


class EphemeralStorage(Protocol):
    """Owns the deletion of a populated holding area."""

    def schedule_expiry(self, directory: Path) -> None: ...


class NullExpiry:
    """Leaves the holding area in place; records what it was asked to expire."""

    def __init__(self):
        self.scheduled: List[Path] = []

    def schedule_expiry(self, directory: Path) -> None:
        self.scheduled.append(directory)
        logger.info(f"[HOLD] Holding area left in place: {directory}")


def render_self_destruct_script(directory: Path) -> str:
    cleanup = shlex.quote(f"rm -rf {shlex.quote(str(directory))}")
    return f"""#!/bin/bash
# This script will delete the maid trash bin when the terminal session ends
trap {cleanup} EXIT
echo "Maid trash bin will be deleted when this terminal is closed."
# Keep the terminal session open until explicit termination
bash
"""


def terminal_command(script_path: Path, platform: Optional[str] = None) -> Optional[List[str]]:
    """Command that opens ``script_path`` in a new terminal, per platform."""
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open", "-a", "Terminal", str(script_path)]
    if platform.startswith("linux"):
        return ["x-terminal-emulator", "-e", str(script_path)]
    if platform == "win32":
        return ["cmd", "/c", "start", "cmd", "/k", str(script_path)]
    return None


class TerminalSelfDestruct:
    """Deletes the holding area when a dedicated terminal window closes."""

    def __init__(self, platform: Optional[str] = None):
        self.platform = platform or sys.platform

    def write_script(self, directory: Path) -> Path:
        script_path = directory / SELF_DESTRUCT_SCRIPT
        script_path.write_text(render_self_destruct_script(directory), encoding="utf-8")
        mode = script_path.stat().st_mode
        script_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script_path

    def schedule_expiry(self, directory: Path) -> None:
        try:
            script_path = self.write_script(directory)
        except OSError as e:
            logger.warning(f"[HOLD] Could not write self-destruct script in {directory}: {e}")
            return

        command = terminal_command(script_path, self.platform)
        if command is None:
            logger.warning(f"[HOLD] No terminal launcher for platform {self.platform}")
            return

        try:
            subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            logger.warning(f"[HOLD] Could not open expiry terminal ({command[0]}): {e}")
            return

        logger.info(f"[HOLD] Expiry terminal opened for {directory}")


class HoldingArea:
    """Timestamped staging directory for discarded files."""

    def __init__(self, root: Path, created_at: Optional[datetime] = None):
        created_at = created_at or datetime.now()
        self.root = root
        self.directory = root / f"{HOLDING_AREA_PREFIX}{created_at.strftime('%Y%m%d_%H%M%S')}"

    @property
    def exists(self) -> bool:
        return self.directory.is_dir()

    def move_all(
        self, paths: Sequence[Path], activity_log: Optional[ActivityLog] = None
    ) -> List[Path]:
        """
        Move files into the holding area, creating it if needed.

        Args:
            paths: Files to move
            activity_log: Optional audit trail

        Returns:
            Destination path of every moved file, in order

        Raises:
            HoldingAreaError: If the directory or a move fails; files moved
                before the failure stay moved and are listed on the error
        """
        if not paths:
            return []

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise HoldingAreaError(f"Failed to create holding area {self.directory}: {e}") from e

        moved: List[Path] = []
        for path in paths:
            destination = unique_destination(self.directory, path.name)
            try:
                shutil.move(str(path), str(destination))
            except OSError as e:
                raise HoldingAreaError(
                    f"Failed to move {path} to {destination}: {e}", moved=moved
                ) from e
            moved.append(destination)
            logger.debug(f"[HOLD] Moved {path} -> {destination}")
            if activity_log is not None:
                activity_log.log("discard", path, destination, "redundant")

        logger.info(f"[HOLD] Moved {len(moved)} file(s) to {self.directory}")
        return moved
