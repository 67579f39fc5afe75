#!/usr/bin/env python3
# ==========================================================
# 🧩  run_all.py — Execute All Onboarding Steps Sequentially
# ==========================================================
# Discovers the numbered step modules in this package
# (00_resolve_repo.py, 10_prompt_email.py, …) and calls each
# step's `main(session)` in numeric order.
#
# 💡 Usage:
#     gh-onboard [repo]
#     python3 -m onboard [repo]
#
# Behavior:
#   - Prints progress in the form (1/8), (2/8), etc.
#   - Stops at the first step that fails, prints its likely
#     causes to stderr and exits 1.
#   - Skipped steps only warn and do not affect the exit code.
# ==========================================================

import importlib
import pkgutil
import sys
from pathlib import Path

from onboard.include.session import Session
from onboard.include.shell_utils import error, log, print_header

PACKAGE = "onboard"


def discover_steps():
    """Return sorted list of step modules like ['00_resolve_repo', ...]."""
    step_dir = Path(__file__).parent
    modules = []
    for module_info in pkgutil.iter_modules([str(step_dir)]):
        name = module_info.name
        if name[:2].isdigit() and "_" in name:
            modules.append(name)
    return sorted(modules, key=lambda n: int(n.split("_")[0]))


def report_failure(result):
    error(result.message)
    if result.hints:
        print("Please check the following:", file=sys.stderr, flush=True)
        for i, hint in enumerate(result.hints, start=1):
            print(f"  {i}. {hint}", file=sys.stderr, flush=True)


def run(session, steps=None):
    """Run the steps against `session` and return the process exit code."""
    steps = discover_steps() if steps is None else steps
    total = len(steps)

    if not steps:
        error("No numbered onboarding steps found.")
        return 1

    for i, name in enumerate(steps, start=1):
        log(f"\n=== ({i}/{total}) Running {name} ===")
        try:
            mod = importlib.import_module(f"{PACKAGE}.{name}")
            result = mod.main(session)
        except SystemExit as e:
            if e.code:
                error(f"{name} exited with code {e.code}. Stopping.")
                return e.code if isinstance(e.code, int) else 1
            continue
        except Exception as e:
            error(f"{name} failed: {e}")
            return 1

        if result.is_failure:
            report_failure(result)
            return 1

    print_header("Setup Complete!")
    log(f"The repository '{session.repo_name}' has been successfully cloned and configured.")
    log("🎉 You're all set!")
    return 0


def parse_args(argv=None):
    """Return the repository token, if any. Further tokens are ignored."""
    argv = sys.argv[1:] if argv is None else argv
    return argv[0] if argv else None


def main(argv=None):
    """Console entry point."""
    repo = parse_args(argv)
    try:
        code = run(Session(argument=repo))
    except KeyboardInterrupt:
        log("\n🛑 Aborted by user.")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
