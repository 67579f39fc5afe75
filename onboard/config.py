# ==========================================================
# ⚙️  config.py — Shared defaults for onboarding steps
# ==========================================================
# Central configuration for the GitHub onboarding procedure.
# Values are fixed; the only input is the optional repo name.
# ==========================================================

from pathlib import Path

# --- Repository ---
ORG_NAME = "GuideToIceland"
DEFAULT_REPO = "monorepo"
GIT_HOST = "github.com"
GIT_USER = "git"
REMOTE_TEMPLATE = "{user}@{host}:{org}/{repo}.git"

# --- SSH ---
SSH_DIR = Path.home() / ".ssh"
KEY_NAME = "id_ed25519"
KEY_TYPE = "ed25519"
KEYS_SETTINGS_URL = f"https://{GIT_HOST}/settings/keys"
AUTH_SUCCESS_MARKER = "successfully authenticated"

# --- Shell startup file ---
SHELL_RC = Path.home() / ".bashrc"
GO_BIN = Path.home() / "go" / "bin"
GO_PATH_COMMENT = "# Add Go binary path for local tools"
GO_PATH_LINE = "export PATH=$PATH:$HOME/go/bin"

# --- Developer tooling ---
TASK_INSTALL_URL = "https://taskfile.dev/install.sh"
TASK_INSTALL_ARGS = ["-d"]
GO_TOOLS = [
    "github.com/SGudbrandsson/setup-env@latest",
    # gitleaks' module path differs from its repository URL after a migration
    "github.com/zricethezav/gitleaks/v8@latest",
    "github.com/evilmartians/lefthook@latest",
]
HOOKS_TOOL = "lefthook"
