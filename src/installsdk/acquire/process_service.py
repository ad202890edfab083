from __future__ import annotations

import logging
import platform
import subprocess
from pathlib import Path


log = logging.getLogger(__name__)


class InstallerLauncher:
    def __init__(self, system: str | None = None):
        self.system = (system or platform.system()).lower()

    def command_for(self, installer_path: Path) -> list[str]:
        if self.system.startswith("win"):
            return [str(installer_path)]
        if self.system.startswith("darwin"):
            return ["open", str(installer_path)]
        return ["xdg-open", str(installer_path)]

    def launch(self, installer_path: Path) -> subprocess.Popen:
        cmd = self.command_for(installer_path)
        log.info("Launching installer: %s", cmd)
        return subprocess.Popen(cmd, shell=False, cwd=str(installer_path.parent))
