"""Application version module.

Installed: version from the distribution metadata.
Source checkout: VERSION file + git commit count since the last tag.
"""

from importlib import metadata

DIST_NAME = "parabola-canvas"


def get_version() -> str:
    """Get the application version string (e.g. '1.0.4')."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return _dev_version()


def _dev_version() -> str:
    """Derive version from VERSION file and git describe (dev only)."""
    import subprocess
    from pathlib import Path

    # editor/src/version.py -> ../../VERSION
    version_file = Path(__file__).resolve().parent.parent.parent / "VERSION"
    try:
        major_minor = version_file.read_text().strip()
    except FileNotFoundError:
        major_minor = "0.0"

    try:
        result = subprocess.run(
            ['git', 'describe', '--tags', '--long'],
            capture_output=True, text=True, check=False,
            cwd=str(version_file.parent),
        )
    except FileNotFoundError:
        return f"{major_minor}.0"  # git not installed

    if result.returncode == 0:
        # Format: v1.0-5-gabcdef  ->  commit count is the middle part
        parts = result.stdout.strip().rsplit('-', 2)
        if len(parts) == 3:
            return f"{major_minor}.{parts[1]}"
    return f"{major_minor}.0"
