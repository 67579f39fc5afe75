#!/usr/bin/env python3
# ==========================================================
# 🔧  Shared Console + Shell Utilities for Onboarding Steps
# ==========================================================
# Provides:
#   - Console helpers (log / warn / error / print_header)
#   - StepResult returned by every numbered step
#   - Shell: runs external commands, probes PATH, downloads
#     installer scripts with progress bars (tqdm)
#   - TerminalChannel: prompts on /dev/tty even when stdin is a pipe
#   - ensure_line_present: idempotent append to shell startup files
# ==========================================================
from __future__ import annotations

import os
import shutil
import subprocess
import sys
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from tqdm import tqdm

OK = "ok"
SKIPPED = "skipped"
FAILED = "failed"

# ---------- Console helpers ----------
def log(msg: str = "") -> None:
    print(msg, flush=True)

def warn(msg: str) -> None:
    print(f"⚠️  WARNING: {msg}", file=sys.stderr, flush=True)

def error(msg: str) -> None:
    print(f"❌ ERROR: {msg}", file=sys.stderr, flush=True)

def print_header(title: str) -> None:
    log()
    log("=" * 66)
    log(f"=> {title}")
    log("=" * 66)

def is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


# ---------- Step results ----------
@dataclass
class StepResult:
    status: str
    message: str = ""
    hints: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, message: str = "") -> "StepResult":
        return cls(OK, message)

    @classmethod
    def skipped(cls, message: str) -> "StepResult":
        return cls(SKIPPED, message)

    @classmethod
    def failed(cls, message: str, hints: Sequence[str] = ()) -> "StepResult":
        return cls(FAILED, message, list(hints))

    @property
    def is_failure(self) -> bool:
        return self.status == FAILED


# ---------- Interactive input ----------
class TerminalChannel:
    """Prompt on the controlling terminal, not on the process's stdin."""

    def __init__(self, tty_path: str = "/dev/tty"):
        self.tty_path = tty_path

    def ask(self, prompt: str) -> str:
        try:
            with open(self.tty_path, "r", encoding="utf-8") as tty_in, \
                    open(self.tty_path, "a", encoding="utf-8") as tty_out:
                tty_out.write(prompt)
                tty_out.flush()
                return tty_in.readline().rstrip("\n")
        except OSError:
            # No controlling terminal (e.g. CI); plain stdin is all there is.
            try:
                return input(prompt)
            except EOFError:
                return ""


# ---------- External commands ----------
class Shell:
    """Thin wrappers around external programs, sharing one PATH."""

    def __init__(self, env: Optional[dict[str, str]] = None):
        self.env = dict(os.environ) if env is None else env

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self.env.get("PATH"))

    def append_path(self, directory: Path) -> None:
        entries = [p for p in self.env.get("PATH", "").split(os.pathsep) if p]
        if str(directory) not in entries:
            entries.append(str(directory))
        self.env["PATH"] = os.pathsep.join(entries)

    def run(self, cmd: Sequence[str], cwd: Optional[Path] = None) -> int:
        """Run a command attached to the terminal; return its exit status."""
        try:
            result = subprocess.run(list(cmd), cwd=cwd, env=self.env)
        except FileNotFoundError:
            error(f"Command not found: {cmd[0]}")
            return 127
        return result.returncode

    def capture(self, cmd: Sequence[str]) -> tuple[int, str]:
        """Run a command and return (exit status, stdout+stderr)."""
        try:
            result = subprocess.run(
                list(cmd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                env=self.env,
            )
        except FileNotFoundError:
            return 127, f"Command not found: {cmd[0]}"
        return result.returncode, result.stdout or ""

    def fetch(self, url: str, progress: bool = True) -> str:
        """Download a text resource (installer script) and return it."""
        with urllib.request.urlopen(url) as resp:
            total = int(resp.headers.get("Content-Length") or 0) or None
            chunks = []
            with tqdm(
                total=total, unit="B", unit_scale=True, disable=not progress or not is_tty(),
                desc=f"Downloading {os.path.basename(url)}"
            ) as bar:
                for chunk in iter(lambda: resp.read(64 * 1024), b""):
                    chunks.append(chunk)
                    bar.update(len(chunk))
        return b"".join(chunks).decode("utf-8")


# ---------- Shell startup file ----------
def ensure_line_present(path: Path, line: str, comment: Optional[str] = None) -> bool:
    """Append `line` (after an optional comment) unless it is already in the file.

    Returns True when the file was changed.
    """
    current = path.read_text(encoding="utf-8") if path.exists() else ""
    if line in current:
        return False

    block = "\n"
    if current and not current.endswith("\n"):
        block = "\n\n"
    if comment:
        block += f"{comment}\n"
    block += f"{line}\n"

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(block)
    return True
