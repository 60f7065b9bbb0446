"""Poetry project operations.

Each operation turns user input into a poetry argument list and runs it
through :class:`~poetctl.core.facade.CommandFacade` in the project root.
Operations that need a project raise ProjectNotFoundError outside one;
``init`` raises ProjectExistsError inside one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from poetctl.core.dependencies import canonical_name, list_dependencies
from poetctl.core.errors import DependencyNotFoundError, ProjectNotFoundError
from poetctl.core.facade import CommandFacade
from poetctl.core.project import (
    find_project_root,
    get_manifest_path,
    require_no_project,
)

if TYPE_CHECKING:
    from poetctl.core.dependencies import DependencyEntry
    from poetctl.core.settings import Settings

logger = logging.getLogger(__name__)

BUILD_FORMATS = ("wheel", "sdist")
VERSION_RULES = (
    "patch",
    "minor",
    "major",
    "prepatch",
    "preminor",
    "premajor",
    "prerelease",
)
DEV_GROUP = "dev"


class ProjectOperator:
    """Runs poetry operations for the project enclosing a directory.

    Attributes:
        directory: Directory the operator was created for.
        root: Project root, or None when not inside a Poetry project.
        facade: Facade executing the commands.

    Example:
        >>> operator = ProjectOperator.for_directory(Path.cwd(), load_settings())
        >>> operator.add(["requests"], dev=False)
        True
    """

    def __init__(self, directory: Path, root: Path | None, facade: CommandFacade) -> None:
        self.directory = directory
        self.root = root
        self.facade = facade

    @classmethod
    def for_directory(cls, directory: Path, settings: Settings) -> ProjectOperator:
        """Create an operator for ``directory``, running commands in its project root.

        Outside a project, commands run in ``directory`` itself.
        """
        directory = directory.resolve()
        root = find_project_root(directory)
        facade = CommandFacade.from_settings(settings, cwd=root or directory)
        return cls(directory, root, facade)

    @property
    def in_project(self) -> bool:
        """Check if the operator's directory is inside a Poetry project."""
        return self.root is not None

    def _require_project(self) -> Path:
        # Re-validated on every call: the manifest may have changed on disk
        root = find_project_root(self.directory)
        if root is None:
            raise ProjectNotFoundError(
                f"Not inside a Poetry project: {self.directory}",
                hint="Run 'poetctl init' to create one here, or 'poetctl new <path>'.",
            )
        self.root = root
        return root

    # =========================================================================
    # Dependencies
    # =========================================================================

    def dependencies(self, dev: bool = False, optional: bool = False) -> list[DependencyEntry]:
        """List declared dependencies of the project.

        Raises:
            ProjectNotFoundError: If not inside a Poetry project.
            NoDependenciesError: If the dependency section is absent.
        """
        root = self._require_project()
        return list_dependencies(get_manifest_path(root), dev=dev, optional=optional)

    def add(
        self,
        packages: list[str],
        dev: bool = False,
        optional: bool = False,
        extras: list[str] | None = None,
    ) -> bool:
        """Add packages to the project.

        Args:
            packages: Package requirements, e.g. ["requests", "httpx@^0.27"].
            dev: Add to the development group.
            optional: Declare the packages as optional.
            extras: Extras to enable on the added packages.

        Raises:
            ValueError: If no packages are given.
            CommandError: If poetry fails.
        """
        self._require_project()
        if not packages:
            msg = "No packages to add"
            raise ValueError(msg)

        args: list[str] = []
        if dev:
            args.extend(["--group", DEV_GROUP])
        if optional:
            args.append("--optional")
        for extra in extras or []:
            args.extend(["--extras", extra])
        args.extend(packages)

        logger.info("Adding %s (dev=%s, optional=%s)", ", ".join(packages), dev, optional)
        return self.facade.execute("add", args)

    def remove(self, package: str, dev: bool = False) -> bool:
        """Remove a declared package from the project.

        Both optional and non-optional entries of the selected section are
        candidates. Names are compared after normalization, so ``Requests``
        matches a declared ``requests``; poetry is given the declared name.

        Raises:
            NoDependenciesError: If the dependency section is absent.
            DependencyNotFoundError: If ``package`` is not declared.
            CommandError: If poetry fails.
        """
        declared = self.dependencies(dev=dev, optional=False)
        declared.extend(self.dependencies(dev=dev, optional=True))
        wanted = canonical_name(package)
        matches = [entry.name for entry in declared if canonical_name(entry.name) == wanted]
        if not matches:
            kind = "development dependencies" if dev else "dependencies"
            raise DependencyNotFoundError(
                f"'{package}' is not declared in the {kind}",
                hint="Run 'poetctl deps' to list declared packages.",
            )

        name = matches[0]
        args = ["--group", DEV_GROUP, name] if dev else [name]
        return self.facade.execute("remove", args)

    # =========================================================================
    # Environment and lock file
    # =========================================================================

    def install(self, no_dev: bool = False, extras: list[str] | None = None) -> bool:
        """Install the project's dependencies."""
        self._require_project()
        args: list[str] = []
        if no_dev:
            args.extend(["--without", DEV_GROUP])
        for extra in extras or []:
            args.extend(["--extras", extra])
        return self.facade.execute("install", args)

    def lock(self, no_update: bool = False) -> bool:
        """Lock dependencies without installing them."""
        self._require_project()
        return self.facade.execute("lock", ["--no-update"] if no_update else [])

    def update(self, packages: list[str] | None = None, dry_run: bool = False) -> bool:
        """Update dependencies to their latest allowed versions."""
        self._require_project()
        args = ["--dry-run"] if dry_run else []
        args.extend(packages or [])
        return self.facade.execute("update", args)

    def check(self) -> bool:
        """Validate the project's pyproject.toml."""
        self._require_project()
        return self.facade.execute("check")

    def show(self, package: str | None = None, tree: bool = False, latest: bool = False) -> str:
        """Return poetry's description of installed packages."""
        self._require_project()
        args: list[str] = []
        if tree:
            args.append("--tree")
        if latest:
            args.append("--latest")
        if package:
            args.append(package)
        return self.facade.query("show", args)

    def env_path(self) -> str:
        """Return the path of the project's virtual environment."""
        self._require_project()
        return self.facade.query("env", ["info", "--path"]).strip()

    # =========================================================================
    # Packaging
    # =========================================================================

    def build(self, fmt: str | None = None) -> bool:
        """Build source and wheel archives.

        Raises:
            ValueError: If ``fmt`` is not "wheel" or "sdist".
        """
        self._require_project()
        if fmt is not None and fmt not in BUILD_FORMATS:
            msg = f"Unknown build format '{fmt}', expected one of: {', '.join(BUILD_FORMATS)}"
            raise ValueError(msg)
        return self.facade.execute("build", ["--format", fmt] if fmt else [])

    def publish(
        self,
        repository: str | None = None,
        username: str | None = None,
        password: str | None = None,
        build: bool = False,
    ) -> bool:
        """Publish the built package to a repository."""
        self._require_project()
        args: list[str] = []
        if build:
            args.append("--build")
        if repository:
            args.extend(["--repository", repository])
        if username:
            args.extend(["--username", username])
        if password:
            args.extend(["--password", password])
        return self.facade.execute("publish", args)

    def version(self, rule: str | None = None) -> str:
        """Show the project version, or bump it by ``rule``.

        Raises:
            ValueError: If ``rule`` is not a known bump rule.
        """
        self._require_project()
        if rule is None:
            return self.facade.query("version", ["--short"]).strip()
        if rule not in VERSION_RULES:
            msg = f"Unknown version rule '{rule}', expected one of: {', '.join(VERSION_RULES)}"
            raise ValueError(msg)
        return self.facade.query("version", [rule]).strip()

    def run(self, command: list[str]) -> bool:
        """Run a command inside the project's virtual environment.

        Raises:
            ValueError: If ``command`` is empty.
        """
        self._require_project()
        if not command:
            msg = "No command to run"
            raise ValueError(msg)
        return self.facade.execute("run", command)

    # =========================================================================
    # Project creation
    # =========================================================================

    def init(self, name: str | None = None) -> bool:
        """Create a pyproject.toml in the operator's directory.

        Raises:
            ProjectExistsError: If already inside a Poetry project.
        """
        require_no_project(self.directory)
        args = ["--no-interaction"]
        if name:
            args.extend(["--name", name])
        return self.facade.execute("init", args)

    def new(self, path: str, name: str | None = None, src: bool = False) -> bool:
        """Create a new project skeleton at ``path``."""
        args: list[str] = []
        if src:
            args.append("--src")
        if name:
            args.extend(["--name", name])
        args.append(path)
        return self.facade.execute("new", args)

    def search(self, query: str) -> str:
        """Search the package index and return poetry's listing."""
        return self.facade.query("search", [query])
