"""Tests for ApplicationRestorer."""

from maintenance_tool.api import ApplicationRestorer, restore
from maintenance_tool.core import SubprocessRunner
from maintenance_tool.models import RestoreStatus, ToggleConfig

from .conftest import FakeRunner

BUILD = "flutter build web"
DEPLOY = "firebase deploy --only hosting"


class TestApplicationRestorer:
    """Build then deploy, with failures reported in the result."""

    def test_success_runs_build_then_deploy(self, project, config, fake_runner):
        result = ApplicationRestorer(config, runner=fake_runner).restore()

        assert result.status == RestoreStatus.SUCCESS
        assert result.is_success
        assert result.exit_code == 0
        assert fake_runner.calls == [(BUILD, project), (DEPLOY, project)]
        assert result.build.command == BUILD
        assert result.deploy.command == DEPLOY

    def test_build_failure_skips_deploy(self, config):
        runner = FakeRunner(fail_on=[BUILD])

        result = ApplicationRestorer(config, runner=runner).restore()

        assert result.status == RestoreStatus.BUILD_FAILED
        assert result.exit_code == 1
        assert runner.commands == [BUILD]
        assert BUILD in result.error
        assert result.deploy is None

    def test_deploy_failure_keeps_build_result(self, config):
        runner = FakeRunner(fail_on=[DEPLOY], returncode=2)

        result = ApplicationRestorer(config, runner=runner).restore()

        assert result.status == RestoreStatus.DEPLOY_FAILED
        assert result.exit_code == 1
        assert runner.commands == [BUILD, DEPLOY]
        assert result.build is not None
        assert "status 2" in result.error

    def test_custom_commands(self, project, fake_runner):
        config = ToggleConfig(
            project_root=project,
            build_command="npm run build",
            deploy_command="netlify deploy --prod"
        )

        restore(config, runner=fake_runner)

        assert fake_runner.commands == ["npm run build", "netlify deploy --prod"]

    def test_steps_reported_between_commands(self, config, fake_runner):
        steps = []

        ApplicationRestorer(config, runner=fake_runner, on_step=steps.append).restore()

        assert steps == [
            f"Building application: {BUILD}",
            "Build completed successfully.",
            f"Deploying application: {DEPLOY}",
        ]

    def test_no_completion_step_after_failed_build(self, config):
        steps = []

        restore(config, runner=FakeRunner(fail_on=[BUILD]), on_step=steps.append)

        assert steps == [f"Building application: {BUILD}"]

    def test_defaults_to_subprocess_runner(self, config):
        restorer = ApplicationRestorer(config)

        assert isinstance(restorer.runner, SubprocessRunner)
        assert restorer.runner.capture_output is False
        assert restorer.runner.timeout is None

    def test_result_to_dict(self, config):
        runner = FakeRunner(fail_on=[BUILD])

        data = restore(config, runner=runner).to_dict()

        assert data["status"] == "build_failed"
        assert "error" in data
        assert "deploy" not in data
