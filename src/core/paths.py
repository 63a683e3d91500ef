"""Project path resolution.

The tool is location-independent: every step runs relative to the project
root, found from the real location of the script that launched it
(symbolic links resolved), never from a hard-coded path.
"""

from __future__ import annotations

from pathlib import Path

# Marks the root of the documented crate.
MANIFEST_NAME = "Cargo.toml"


def project_root() -> Path:
    # core/paths.py -> core -> src -> <project_root>
    return Path(__file__).resolve().parents[2]


def find_manifest_dir(start: Path) -> Path | None:
    """Return the nearest directory at or above `start` holding `Cargo.toml`."""

    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / MANIFEST_NAME).is_file():
            return candidate
    return None


def resolve_base_dir(override: Path | None = None, *, anchor: Path | None = None) -> Path:
    """Return the directory every publish step runs from.

    Order:
    1) an explicit `override` (configuration);
    2) `anchor`, the directory of the launching script (`main.py`);
    3) the source checkout this module lives in, when it holds `Cargo.toml`;
    4) the nearest `Cargo.toml` at or above the current directory, which is
       where an installed console script ends up.

    Raises `FileNotFoundError` when none of them applies.
    """

    if override is not None:
        return Path(override).expanduser().resolve(strict=True)
    if anchor is not None:
        return Path(anchor).resolve(strict=True)

    checkout = project_root()
    if (checkout / MANIFEST_NAME).is_file():
        return checkout

    found = find_manifest_dir(Path.cwd())
    if found is None:
        raise FileNotFoundError(
            f"no {MANIFEST_NAME} found at or above {Path.cwd()}; run from the crate "
            "or set XYZ_DOCS_BASE_DIR"
        )
    return found
