"""Resolve Python and Databricks runtime values for a project type.

Python libraries pin PYTHON_LIB_VERSION. Databricks Asset Bundles track the
latest LTS entry of the packaged runtime manifest.
"""

import importlib.resources
import json

from blueprint.answers import ProjectType
from blueprint.errors import RuntimeManifestError

RUNTIME_MANIFEST = "databricks_runtime.json"
PYTHON_LIB_VERSION = "3.14"


def load_runtime_manifest(package="blueprint"):
    """Load the runtime manifest from ``{package}.resources``."""
    resource = importlib.resources.files(f"{package}.resources").joinpath(RUNTIME_MANIFEST)
    try:
        return json.loads(resource.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RuntimeManifestError("Unable to load Databricks runtime manifest", RUNTIME_MANIFEST) from e


def latest_runtime(manifest=None):
    """Return (version, entry) for the manifest's latest LTS runtime."""
    if manifest is None:
        manifest = load_runtime_manifest()
    version = manifest.get("latest_lts")
    if not version:
        raise RuntimeManifestError("Runtime manifest is missing latest_lts", RUNTIME_MANIFEST)
    entry = manifest.get("runtimes", {}).get(version)
    if entry is None:
        raise RuntimeManifestError(f"Runtime manifest has no entry for {version}", RUNTIME_MANIFEST)
    return version, entry


def _latest_runtime_value(key, manifest):
    version, entry = latest_runtime(manifest)
    if key not in entry:
        raise RuntimeManifestError(f"Runtime {version} is missing {key}", RUNTIME_MANIFEST)
    return entry[key]


def resolve_python_version(project_type, manifest=None):
    """Python version for .python-version and the CI matrix."""
    if project_type is ProjectType.PYTHON_LIB:
        return PYTHON_LIB_VERSION
    return _latest_runtime_value("python", manifest)


def resolve_requires_python(project_type, manifest=None):
    """requires-python spec for DABs projects; None for other project types."""
    if project_type is ProjectType.DABS:
        return _latest_runtime_value("requires_python", manifest)
    return None


def resolve_databricks_runtime(project_type, manifest=None):
    """Databricks runtime version (e.g. "17.3") for DABs projects, else None."""
    if project_type is ProjectType.DABS:
        return latest_runtime(manifest)[0]
    return None
