"""Interview questions for a new project.

Each answer is echoed back onto its question line in bold green once it has
been given, so the finished interview reads as a short summary.
"""

from blueprint.answers import CIProvider, ProjectType
from blueprint.plan import package_name
from blueprint.tui.menu import create_menu, option_label
from blueprint.tui.terminal import Terminal


CI_OPTIONS = [
    (CIProvider.GITHUB, "GitHub"),
    (CIProvider.AZURE, "Azure DevOps"),
]

PROJECT_TYPE_OPTIONS = [
    (ProjectType.PYTHON_LIB, "Python Library"),
    (ProjectType.DABS, "Databricks Asset Bundle"),
]


def ask_question(terminal: Terminal, question: str) -> str:
    """Ask a free-text question and return the trimmed answer."""
    answer = terminal.read_line(question).strip()
    terminal.rewrite_prev_line(question + terminal.style_answer(answer))
    return answer


def ask_choice(terminal: Terminal, question: str, options):
    """Ask a menu question and return the selected option key."""
    terminal.write(question)
    answer = create_menu(options, terminal=terminal)
    label = option_label(options, answer) or answer.value
    terminal.rewrite_prev_line(f"{question} {terminal.style_answer(label)}")
    return answer


def ask_project_name(terminal: Terminal) -> str:
    """Ask for the project name until it yields a usable package name."""
    while True:
        name = ask_question(terminal, "What is your project's name? ")
        if package_name(name):
            return name
        terminal.write("A project name needs at least one letter or digit.\n")


def choose_ci_provider(terminal: Terminal) -> CIProvider:
    return ask_choice(terminal, "Choose your CI provider:", CI_OPTIONS)


def choose_project_type(terminal: Terminal) -> ProjectType:
    return ask_choice(terminal, "Choose your project type:", PROJECT_TYPE_OPTIONS)


def ask_databricks_host(terminal: Terminal) -> str:
    return ask_question(terminal, "Enter your Databricks host name: ")


def prompt_answers(terminal=None, *, given=None):
    """Interview the user and return the answers dict.

    Asks, in order: project name, CI provider, project type and, for
    Databricks Asset Bundles only, the Databricks host. Answers already
    present in ``given`` are not asked again.

    Returns:
        {"project_name": str, "ci_provider": CIProvider,
         "project_type": ProjectType} plus "hostname" for DABs projects.
    """
    if terminal is None:
        terminal = Terminal()
    given = {k: v for k, v in (given or {}).items() if v is not None}

    answers = {
        "project_name": given.get("project_name") or ask_project_name(terminal),
        "ci_provider": given.get("ci_provider") or choose_ci_provider(terminal),
        "project_type": given.get("project_type") or choose_project_type(terminal),
    }
    if answers["project_type"] is ProjectType.DABS:
        answers["hostname"] = given.get("hostname") or ask_databricks_host(terminal)
    return answers
