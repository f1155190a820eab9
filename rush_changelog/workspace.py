"""Workspace manifest (rush.json) reading and package lookup."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .errors import ManifestNotFound, ManifestParseError, PackageNotFound
from .jsonc import read_jsonc
from .models import WorkspaceManifest
from .shell import info

MANIFEST_FILENAME = "rush.json"


def load_manifest(workspace_root: Path) -> WorkspaceManifest:
    """Load and validate rush.json from the workspace root.

    Raises:
        ManifestNotFound: If rush.json does not exist under the root.
        ManifestParseError: If it cannot be read, parsed or validated.
    """
    manifest_path = Path(workspace_root).resolve() / MANIFEST_FILENAME

    if not manifest_path.is_file():
        raise ManifestNotFound(
            f"Cannot detect {MANIFEST_FILENAME} file at {manifest_path}. "
            "Please ensure the working-directory input points to the directory "
            f"containing {MANIFEST_FILENAME}, or that {MANIFEST_FILENAME} exists "
            "in the repository root."
        )

    try:
        data = read_jsonc(manifest_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestParseError(
            f"Failed to parse {MANIFEST_FILENAME} at {manifest_path}: {exc}"
        ) from exc

    try:
        manifest = WorkspaceManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestParseError(
            f"Failed to parse {MANIFEST_FILENAME} at {manifest_path}: {exc}"
        ) from exc

    info(f"{MANIFEST_FILENAME}: {manifest_path} ({len(manifest.packages)} projects)")
    return manifest


def resolve_package_folder(
    manifest: WorkspaceManifest, package_name: str, workspace_root: Path
) -> Path:
    """Map a package name to its absolute project folder.

    Matching is exact and case-sensitive; the first declaration wins if a
    name appears twice. Relative folders are joined to the workspace root,
    absolute ones are used as they are.

    Raises:
        PackageNotFound: If no project declares ``package_name``.
    """
    for ref in manifest.packages:
        if ref.name == package_name:
            return (Path(workspace_root) / ref.folder_path).resolve()

    raise PackageNotFound(
        f'Project with name "{package_name}" not found in {MANIFEST_FILENAME}'
    )


def find_package_folder(package_name: str, workspace_root: Path) -> Path:
    """Read rush.json under ``workspace_root`` and resolve ``package_name``."""
    manifest = load_manifest(workspace_root)
    folder = resolve_package_folder(manifest, package_name, workspace_root)
    info(f"{package_name} → {folder}")
    return folder
