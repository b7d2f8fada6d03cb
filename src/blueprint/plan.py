"""Plan the on-disk layout for a new project."""

import os
import re
from dataclasses import dataclass, replace
from typing import Dict, Optional

from blueprint import runtime
from blueprint.answers import CIProvider, ProjectType
from blueprint.errors import UnknownChoiceError

PKG_PLACEHOLDER = "{pkg}"


@dataclass(frozen=True)
class LayoutEntry:
    """One file to create: where it goes and which template renders it.

    A source of None means the file is created empty.
    """

    destination: str
    source: Optional[str] = None


LAYOUT_SPEC: Dict[str, LayoutEntry] = {
    "main": LayoutEntry("src/{pkg}/main.py", "main.py.j2"),
    "python-init": LayoutEntry("src/{pkg}/__init__.py"),
    "runtime": LayoutEntry("src/{pkg}/runtime.py", "runtime.py.j2"),
    "readme": LayoutEntry("README.md", "readme.md.j2"),
    "gitignore": LayoutEntry(".gitignore", "gitignore.j2"),
    "python-version": LayoutEntry(".python-version", "python-version.j2"),
    "pyproject": LayoutEntry("pyproject.toml", "pyproject.toml.j2"),
    "pre-commit": LayoutEntry(".pre-commit-config.yaml", "pre-commit-config.yaml.j2"),
    "conftest": LayoutEntry("tests/conftest.py", "conftest.py.j2"),
    "test-init": LayoutEntry("tests/__init__.py"),
    "test-main": LayoutEntry("tests/test_main.py", "test_main.py.j2"),
    "makefile": LayoutEntry("Makefile", "makefile.j2"),
    "tooling-md": LayoutEntry("docs/tooling.md", "docs/tooling.md.j2"),
    "github-ci": LayoutEntry(".github/workflows/ci.yaml", "ci/github/ci.yaml.j2"),
    "github-bump": LayoutEntry(".github/workflows/bump.yaml", "ci/github/bump.yaml.j2"),
    "github-ci-md": LayoutEntry("docs/ci.md", "docs/github_ci.md.j2"),
    "github-versioning-md": LayoutEntry("docs/versioning.md", "docs/github_versioning.md.j2"),
    "azure-ci": LayoutEntry(".azure/ci.yaml", "ci/azure/ci.yaml.j2"),
    "azure-bump": LayoutEntry(".azure/bump.yaml", "ci/azure/bump.yaml.j2"),
    "azure-ci-md": LayoutEntry("docs/ci.md", "docs/azure_ci.md.j2"),
    "azure-versioning-md": LayoutEntry("docs/versioning.md", "docs/azure_versioning.md.j2"),
    "databricks-yaml": LayoutEntry("databricks.yaml", "databricks.yaml.j2"),
    "sample-job": LayoutEntry("resources/sample_job.job.yaml", "sample_job.job.yaml.j2"),
}

BASE_LAYOUT_IDS = (
    "main",
    "python-init",
    "runtime",
    "readme",
    "gitignore",
    "python-version",
    "pyproject",
    "pre-commit",
    "conftest",
    "test-init",
    "test-main",
    "makefile",
    "tooling-md",
)

CI_LAYOUT_IDS = {
    CIProvider.GITHUB: ("github-ci", "github-bump", "github-ci-md", "github-versioning-md"),
    CIProvider.AZURE: ("azure-ci", "azure-bump", "azure-ci-md", "azure-versioning-md"),
}

PROJECT_TYPE_LAYOUT_IDS = {
    ProjectType.PYTHON_LIB: (),
    ProjectType.DABS: ("databricks-yaml", "sample-job"),
}


def package_name(project_name: str) -> str:
    """Turn a project name into a Python package name.

    "My Project-2" -> "my_project_2". Returns "" when nothing usable is left.
    """
    name = project_name.strip().lower()
    name = re.sub(r"[^a-z0-9_]+", "_", name)
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def _select(ids):
    return {layout_id: LAYOUT_SPEC[layout_id] for layout_id in ids}


def choose_ci_layout(answers):
    ci_provider = answers.get("ci_provider")
    if ci_provider not in CI_LAYOUT_IDS:
        raise UnknownChoiceError("CI provider", ci_provider)
    return _select(CI_LAYOUT_IDS[ci_provider])


def choose_project_files(answers):
    project_type = answers.get("project_type")
    if project_type not in PROJECT_TYPE_LAYOUT_IDS:
        raise UnknownChoiceError("project type", project_type)
    return _select(PROJECT_TYPE_LAYOUT_IDS[project_type])


def compose_layout(answers):
    """Base files plus the CI and project-type specific ones, still relative."""
    return {
        **_select(BASE_LAYOUT_IDS),
        **choose_ci_layout(answers),
        **choose_project_files(answers),
    }


def apply_pkg_placeholder(layout, pkg):
    return {
        layout_id: replace(entry, destination=entry.destination.replace(PKG_PLACEHOLDER, pkg))
        for layout_id, entry in layout.items()
    }


def qualify_layout(layout, root):
    """Prefix every destination with root."""
    return {
        layout_id: replace(entry, destination=os.path.join(root, *entry.destination.split("/")))
        for layout_id, entry in layout.items()
    }


def project_root(answers, base_dir="."):
    return os.path.join(base_dir, answers["project_name"])


def plan_layout(answers, base_dir="."):
    """Plan the files for a new project.

    Args:
        answers: Interview answers (project_name, ci_provider, project_type).
        base_dir: Directory the project directory is created in.

    Returns:
        Dict of layout id -> LayoutEntry with OS-correct destination paths
        under ``base_dir/project_name``.
    """
    layout = compose_layout(answers)
    layout = apply_pkg_placeholder(layout, package_name(answers["project_name"]))
    return qualify_layout(layout, project_root(answers, base_dir))


def template_data(answers):
    """Build the template variables from the answers.

    Combines the raw answers, the normalised keys templates use, and the
    runtime values derived from the project type.
    """
    project_type = answers["project_type"]
    return {
        **answers,
        "project_name": answers["project_name"],
        "package_name": package_name(answers["project_name"]),
        "ci_provider": answers["ci_provider"].value,
        "project_type": project_type.value,
        "databricks_host": answers.get("hostname"),
        "python_version_value": runtime.resolve_python_version(project_type),
        "requires_python_value": runtime.resolve_requires_python(project_type),
        "databricks_runtime": runtime.resolve_databricks_runtime(project_type),
    }
