#!/usr/bin/env python3
# =====================================================================
# 📋 30_enroll_key.py
# ---------------------------------------------------------------------
# PURPOSE:
#   Show the public key and wait until the user has added it on
#   GitHub. The script cannot check this; the next step does.
# =====================================================================

from onboard.config import KEYS_SETTINGS_URL
from onboard.include.shell_utils import StepResult, log, print_header

CONTINUE_PROMPT = "Once you have added the key to GitHub, press [Enter] to continue..."


def main(session):
    print_header("Step 2: ACTION REQUIRED - Add SSH Key to GitHub")
    try:
        public_key = session.public_key_path.read_text(encoding="utf-8")
    except OSError as e:
        return StepResult.failed(f"Could not read {session.public_key_path}: {e}")

    log("The script will now display your public SSH key.")
    log("You must add this key to your GitHub account before we can continue.")
    log()
    log("1. Copy the entire line of text below (it starts with 'ssh-ed25519...'):")
    log()
    log(public_key.rstrip("\n"))
    log()
    log("2. Open your browser and navigate to GitHub's SSH key settings:")
    log(f"   {KEYS_SETTINGS_URL}")
    log()
    log("3. Click 'New SSH key', give it a title, and paste the key.")
    log()

    # any answer, including an empty line, continues
    session.channel.ask(CONTINUE_PROMPT)
    return StepResult.ok()
