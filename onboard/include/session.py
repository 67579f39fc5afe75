# ==========================================================
# 🧭  Session state shared by all onboarding steps
# ==========================================================
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from onboard.config import KEY_NAME, SHELL_RC, SSH_DIR
from onboard.include.shell_utils import Shell, TerminalChannel


@dataclass
class Session:
    """Collaborators and state of one onboarding run."""

    argument: Optional[str] = None
    channel: TerminalChannel = field(default_factory=TerminalChannel)
    shell: Shell = field(default_factory=Shell)
    ssh_dir: Path = SSH_DIR
    shell_rc: Path = SHELL_RC
    workdir: Path = field(default_factory=Path.cwd)

    repo_name: str = ""
    repo_url: str = ""
    email: str = ""

    @property
    def key_path(self) -> Path:
        return self.ssh_dir / KEY_NAME

    @property
    def public_key_path(self) -> Path:
        return self.ssh_dir / f"{KEY_NAME}.pub"

    @property
    def repo_dir(self) -> Path:
        return self.workdir / self.repo_name
