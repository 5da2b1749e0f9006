from __future__ import annotations

"""
Installed-package import smoke test.

Validates that an installed `uocplay` (not the repo checkout) imports cleanly
from an empty working directory, without a `.env` file, and that the bundled
loyalty rules are shipped as package data. No data files are read or written.
"""

from pathlib import Path
import os
import sys
import tempfile


def main() -> None:
    # Ensure we don't accidentally import from the repo checkout (cwd or repo root).
    repo_root = Path(__file__).resolve().parents[1]
    backend_root = repo_root / "backend"
    orig_cwd = os.getcwd()
    orig_sys_path = list(sys.path)
    try:
        with tempfile.TemporaryDirectory() as tmpdir:
            os.chdir(tmpdir)
            sys.path = [
                p
                for p in sys.path
                if p
                and Path(p).resolve() not in (repo_root, backend_root)
            ]

            import uocplay  # noqa: F401

            import uocplay.domain  # noqa: F401
            import uocplay.io  # noqa: F401
            import uocplay.people  # noqa: F401
            import uocplay.ports  # noqa: F401
            import uocplay.subscriptions  # noqa: F401
            from uocplay.config import loyalty, settings

            if not settings.LOYALTY_RULES_PATH.exists():
                raise SystemExit(f"Bundled loyalty rules missing: {settings.LOYALTY_RULES_PATH}")
            spend = loyalty.get_spend_per_tier()
            if spend != settings.DEFAULT_SPEND_PER_TIER:
                raise SystemExit(f"Unexpected spend_per_tier from bundled rules: {spend}")

            print(f"OK: uocplay {uocplay.__version__} imports")
    finally:
        os.chdir(orig_cwd)
        sys.path = orig_sys_path


if __name__ == "__main__":
    main()
