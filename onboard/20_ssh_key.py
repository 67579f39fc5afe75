#!/usr/bin/env python3
# =====================================================================
# 🔑 20_ssh_key.py
# ---------------------------------------------------------------------
# PURPOSE:
#   Reuse ~/.ssh/id_ed25519 if its public half exists, otherwise
#   generate a new ED25519 keypair without passphrase.
#
#   An existing key is never overwritten, rotated or inspected, even
#   if it is of another type or unusable.
# =====================================================================

from onboard.config import KEY_TYPE
from onboard.include.shell_utils import StepResult, log, print_header


def ensure_ssh_dir(ssh_dir):
    ssh_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    ssh_dir.chmod(0o700)


def keygen_command(key_path, email):
    return ["ssh-keygen", "-t", KEY_TYPE, "-C", email, "-f", str(key_path), "-N", ""]


def main(session):
    print_header("Step 1: Checking for SSH Key")
    pub = session.public_key_path

    if pub.is_file():
        log(f"✅ An existing SSH key was found at {pub}. We will use this key.")
        return StepResult.ok("reused")

    log("No existing SSH key found. A new one will be generated.")
    ensure_ssh_dir(session.ssh_dir)

    log(f"🔐 Generating a new {KEY_TYPE.upper()} SSH key...")
    code = session.shell.run(keygen_command(session.key_path, session.email))
    if code != 0:
        return StepResult.failed(f"ssh-keygen exited with code {code}.")
    if not pub.is_file():
        return StepResult.failed(f"ssh-keygen reported success but {pub} is missing.")

    log("✅ Successfully generated a new SSH key.")
    return StepResult.ok("generated")
