#!/usr/bin/env python3
# =====================================================================
# 🧩 60_clone_repo.py
# ---------------------------------------------------------------------
# PURPOSE:
#   Clone the selected repository over SSH into ./<repo>.
#   A clone failure stops the run; nothing is cleaned up.
# =====================================================================

from onboard.include.shell_utils import StepResult, log, print_header

HINTS = [
    "Your SSH key has not been added to your GitHub account.",
    "The repository does not exist.",
    "You do not have permission to access the repository.",
]


def main(session):
    print_header("Step 6: Cloning the Repository")
    log(f"Attempting to clone '{session.repo_url}'...")
    log()

    code = session.shell.run(["git", "clone", session.repo_url, session.repo_name], cwd=session.workdir)
    if code != 0:
        return StepResult.failed(f"Failed to clone '{session.repo_url}' (git exited with code {code}).", HINTS)

    log(f"✅ Repository ready at {session.repo_dir}")
    return StepResult.ok()
