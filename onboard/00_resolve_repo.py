#!/usr/bin/env python3
# =====================================================================
# 🧩 00_resolve_repo.py
# ---------------------------------------------------------------------
# PURPOSE:
#   Resolve which repository of the organization to clone and build
#   its SSH remote address. No validation happens here; a bad name
#   only shows up when the clone step fails.
# =====================================================================

from onboard.config import DEFAULT_REPO, GIT_HOST, GIT_USER, ORG_NAME, REMOTE_TEMPLATE
from onboard.include.shell_utils import StepResult, log, print_header


def resolve_repo_name(token=None, default=DEFAULT_REPO):
    """Return `token` verbatim if non-empty, else the default repository."""
    return token if token else default


def remote_url(repo, org=ORG_NAME, host=GIT_HOST):
    return REMOTE_TEMPLATE.format(user=GIT_USER, host=host, org=org, repo=repo)


def main(session):
    session.repo_name = resolve_repo_name(session.argument)
    session.repo_url = remote_url(session.repo_name)

    print_header("GitHub SSH Key and Repo Setup")
    log(f"This script will help you set up an SSH key and clone the '{session.repo_name}' repository.")
    log("The script will stop immediately if any step fails.")
    return StepResult.ok(session.repo_url)
