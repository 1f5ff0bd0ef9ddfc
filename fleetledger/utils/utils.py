"""Generic project helpers."""

import os
from pathlib import Path

HOME_ENV_VAR = "FLEETLEDGER_HOME"


def get_project_root() -> Path:
    """Return the directory that holds the ``logs`` folder.

    ``FLEETLEDGER_HOME`` wins when set. A source checkout resolves to the
    repository root; an installed package uses the working directory so
    nothing is written inside site-packages.

    Returns:
        Path: Absolute base directory for runtime files.
    """
    override = os.getenv(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    checkout = Path(__file__).resolve().parents[2]
    if (checkout / "pyproject.toml").is_file():
        return checkout
    return Path.cwd()


__all__ = ["HOME_ENV_VAR", "get_project_root"]
