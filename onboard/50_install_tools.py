#!/usr/bin/env python3
# =====================================================================
# 🧰 50_install_tools.py
# ---------------------------------------------------------------------
# PURPOSE:
#   Install developer tooling:
#     1. Taskfile (always) via its official installer script.
#     2. If Go is installed: put ~/go/bin on PATH (shell rc + this
#        session) and `go install` setup-env, gitleaks and lefthook.
#
#   A missing Go toolchain only skips part 2 with a warning.
# =====================================================================

import urllib.error

from onboard.config import (
    GO_BIN,
    GO_PATH_COMMENT,
    GO_PATH_LINE,
    GO_TOOLS,
    TASK_INSTALL_ARGS,
    TASK_INSTALL_URL,
)
from onboard.include.shell_utils import StepResult, ensure_line_present, log, print_header, warn


def install_taskfile(shell):
    log("⬇️  Installing Taskfile...")
    try:
        script = shell.fetch(TASK_INSTALL_URL)
    except (urllib.error.URLError, OSError) as e:
        return StepResult.failed(
            f"Could not download the Taskfile installer from {TASK_INSTALL_URL}: {e}",
            ["Check your internet connection and try the script again."],
        )

    code = shell.run(["sh", "-c", script, "--", *TASK_INSTALL_ARGS])
    if code != 0:
        return StepResult.failed(f"Taskfile installer exited with code {code}.")
    log("✅ Taskfile installation command executed.")
    return StepResult.ok()


def setup_go_tools(session):
    shell = session.shell
    print_header("Step 5: Setting up Go Environment & Tools")
    if not shell.which("go"):
        warn("The 'go' command was not found. Skipping Go tool installation.")
        warn("Please install Go (https://go.dev/doc/install) and run the tool setup manually if needed.")
        return StepResult.skipped("go not installed")

    log("✅ Go installation found. Proceeding with setup...")
    log(f"Updating shell configuration ({session.shell_rc}) to include Go binary path...")
    if ensure_line_present(session.shell_rc, GO_PATH_LINE, comment=GO_PATH_COMMENT):
        log("   ➕ Go binary path added.")
    else:
        log(f"   ✅ Go binary path already exists in {session.shell_rc}. No changes made.")

    # Same effect as sourcing the rc file: later steps find freshly installed binaries.
    shell.append_path(GO_BIN)

    log()
    log("📦 Installing Go tools...")
    for module in GO_TOOLS:
        log(f"   ➤ go install {module}")
        code = shell.run(["go", "install", module])
        if code != 0:
            return StepResult.failed(f"go install {module} exited with code {code}.")
    log("✅ Go tools installed successfully.")
    return StepResult.ok()


def main(session):
    print_header("Step 4: Installing Developer Tools")
    result = install_taskfile(session.shell)
    if result.is_failure:
        return result
    return setup_go_tools(session)
