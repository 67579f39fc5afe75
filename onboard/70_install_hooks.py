#!/usr/bin/env python3
# =====================================================================
# 🪝 70_install_hooks.py
# ---------------------------------------------------------------------
# PURPOSE:
#   Register the git hooks declared in the cloned repository's
#   lefthook configuration. Skipped with a warning when lefthook is
#   not on PATH.
# =====================================================================

from onboard.config import HOOKS_TOOL
from onboard.include.shell_utils import StepResult, log, print_header, warn


def main(session):
    print_header("Step 7: Initializing Lefthook")
    if not session.shell.which(HOOKS_TOOL):
        warn(f"'{HOOKS_TOOL}' command not found. Skipping {HOOKS_TOOL} initialization.")
        return StepResult.skipped(f"{HOOKS_TOOL} not installed")

    log(f"Changing directory to '{session.repo_name}' to install git hooks...")
    code = session.shell.run([HOOKS_TOOL, "install"], cwd=session.repo_dir)
    if code != 0:
        return StepResult.failed(f"'{HOOKS_TOOL} install' exited with code {code}.")

    log("✅ Lefthook git hooks installed successfully.")
    return StepResult.ok()
