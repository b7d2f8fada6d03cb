"""Answer values collected by the interview and consumed by the planner."""

from enum import Enum


class CIProvider(Enum):
    GITHUB = "github"
    AZURE = "azure"


class ProjectType(Enum):
    PYTHON_LIB = "python-lib"
    DABS = "dabs"
