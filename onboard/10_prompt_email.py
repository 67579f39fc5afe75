#!/usr/bin/env python3
# =====================================================================
# ✉️  10_prompt_email.py
# ---------------------------------------------------------------------
# PURPOSE:
#   Ask for the email address used as the comment of a new SSH key.
#   An empty answer aborts the whole run; there is no retry.
# =====================================================================

from onboard.include.shell_utils import StepResult, log

PROMPT = "Please enter the email address associated with your GitHub account: "


def main(session):
    log()
    email = session.channel.ask(PROMPT).strip()
    if not email:
        return StepResult.failed("Email cannot be empty. Aborting script.")

    session.email = email
    return StepResult.ok()
