"""Project context probe.

Contains:
- PROJECT_MARKERS: Marker file name to ecosystem label mapping
- ProjectContext: Detected ecosystem labels
- probe_project_context: Scan a directory for marker files
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


# Checked in this order; labels keep this order in the rendered description
PROJECT_MARKERS = {
    "go.mod": "Go project",
    "package.json": "JavaScript/Node.js project",
    "pom.xml": "Java/Maven project",
    "build.gradle": "Java/Gradle project",
    "build.gradle.kts": "Java/Gradle project",
    "CMakeLists.txt": "C/C++ project with CMake",
    "pyproject.toml": "Python project",
    "setup.py": "Python project",
    "Cargo.toml": "Rust project",
    "Gemfile": "Ruby project",
}


@dataclass(frozen=True)
class ProjectContext:
    """Ecosystems detected in the working directory."""

    labels: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.labels

    def describe(self) -> str:
        """Render the labels as one sentence fragment, or "" if none."""
        if not self.labels:
            return ""
        return "Project files include: " + " ".join(f"{label}." for label in self.labels)

    def __str__(self) -> str:
        return self.describe()


def probe_project_context(root: Optional[Path] = None) -> ProjectContext:
    """Detect the project's ecosystems from top-level marker files.

    Failures are not fatal: they are logged and an empty context is
    returned so generation can continue without it.

    Args:
        root: Directory to scan (defaults to the current directory).

    Returns:
        The detected ProjectContext.
    """
    root = root or Path.cwd()

    try:
        entries = {entry.name for entry in root.iterdir()}
    except OSError as e:
        logger.warning("Couldn't get project info: %s", e)
        return ProjectContext()

    labels: list[str] = []
    for marker, label in PROJECT_MARKERS.items():
        if marker in entries and label not in labels:
            labels.append(label)

    logger.debug("Detected project context: %s", labels or "none")
    return ProjectContext(labels=tuple(labels))
