"""
Build and test step sequencing.

Each command is a fixed sequence of steps. Steps run one at a time and the
first step that does not succeed ends the sequence; its result becomes the
result of the whole command.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.models.config import BuildConfiguration, ColbConfig, EventHandlers
from ...core.models.invocation import DependenciesOf, ExactPackage, Exited, Intent, RunResult
from ..execution.runner import ProcessRunner
from ..invocation.pipeline import (
    ColconInvocation,
    TestConfiguration,
    TestResultConfiguration,
    ctest_single,
    ninja_build_target,
)

Step = Callable[[], RunResult]


class Coordinator:
    """
    Runs the build and test sequences for one package in one workspace.

    Usage:
        coordinator = Coordinator(workspace, config, runner, presenter)
        result = coordinator.build("my_pkg")
        raise SystemExit(result.exit_code)
    """

    def __init__(
        self,
        workspace: Path,
        config: ColbConfig,
        runner: ProcessRunner,
        presenter: IPresenter,
        logger: ILogger | None = None,
    ) -> None:
        self._workspace = workspace
        self._config = config
        self._runner = runner
        self._presenter = presenter
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ..logging import get_logger

            self._logger = get_logger()
        return self._logger

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def build(self, package: str, skip_dependencies: bool = False) -> RunResult:
        """
        Build the dependencies of ``package`` (unless skipped), then ``package``.

        Returns:
            Result of the first failing step, or of the package build.
        """
        steps: list[Step] = []
        if not skip_dependencies:
            steps.append(lambda: self._build_dependencies(package))
        steps.append(lambda: self._build_package(package))
        return self._run_steps(steps)

    def test(
        self,
        package: str,
        test: str | None = None,
        skip_rebuild: bool = False,
        rebuild_dependencies: bool = False,
    ) -> RunResult:
        """
        Rebuild and run the tests of ``package``.

        With ``test`` set only that target is rebuilt (via ninja) and only
        that test is run (via ctest); no result report follows. Otherwise
        the package is rebuilt, its whole suite runs through colcon, and the
        recorded results are reported.
        """
        steps: list[Step] = []
        if rebuild_dependencies and not skip_rebuild:
            steps.append(lambda: self._build_dependencies(package))
            if test is not None:
                # ninja needs a configured build tree for the package
                steps.append(lambda: self._build_package(package))

        if not skip_rebuild:
            if test is not None:
                steps.append(lambda: self._build_test_target(package, test))
            else:
                steps.append(lambda: self._build_package(package))

        if test is not None:
            steps.append(lambda: self._run_single_test(package, test))
        else:
            steps.append(lambda: self._run_tests(package))
            steps.append(lambda: self._report_results(package))

        return self._run_steps(steps)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _run_steps(self, steps: list[Step]) -> RunResult:
        result: RunResult = Exited(code=0)
        for index, step in enumerate(steps, 1):
            result = step()
            if not result.success:
                self.logger.info(
                    "Step %d/%d failed (exit code %d), stopping",
                    index,
                    len(steps),
                    result.exit_code,
                )
                return result
        return result

    def _colcon_build(self, profile: BuildConfiguration, intent: Intent) -> RunResult:
        return (
            ColconInvocation(self._workspace, log=False)
            .build(self._config.install)
            .configure(profile)
            .run(intent, self._runner)
        )

    def _build_dependencies(self, package: str) -> RunResult:
        self._presenter.header(f"Building dependencies for '{package}'")
        return self._colcon_build(self._config.upstream, DependenciesOf(package=package))

    def _build_package(self, package: str) -> RunResult:
        self._presenter.header(f"Building '{package}'")
        return self._colcon_build(self._config.package, ExactPackage(package=package))

    def _build_test_target(self, package: str, test: str) -> RunResult:
        self._presenter.header(f"Building test '{test}' in '{package}'")
        return ninja_build_target(self._workspace, package, test).run(self._runner)

    def _run_single_test(self, package: str, test: str) -> RunResult:
        self._presenter.header(f"Running test '{test}' in '{package}'")
        return ctest_single(self._workspace, package, test).run(self._runner)

    def _run_tests(self, package: str) -> RunResult:
        self._presenter.header(f"Running tests for '{package}'")
        config = TestConfiguration(package=package, event_handlers=EventHandlers.silent())
        return ColconInvocation(self._workspace, log=True).test(config).run(self._runner)

    def _report_results(self, package: str) -> RunResult:
        self._presenter.header(f"Test results for '{package}'")
        config = TestResultConfiguration(package=package, verbose=True, all=True)
        return ColconInvocation(self._workspace, log=False).test_result(config).run(self._runner)
