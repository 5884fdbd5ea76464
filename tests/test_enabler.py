"""Tests for MaintenanceEnabler."""

import shutil

import pytest

from maintenance_tool.api import MaintenanceEnabler, enable
from maintenance_tool.api.exceptions import AssetNotFoundError, EnableError, ExternalProcessError
from maintenance_tool.constants import STAGING_DIR_PREFIX
from maintenance_tool.models import OperationStatus
from maintenance_tool.utils import file_utils

from .conftest import FAVICON_PNG, MAINTENANCE_HTML, FakeRunner


def _listing(directory):
    return sorted(p.name for p in directory.iterdir())


class TestEnable:
    """Copying the maintenance bundle into the publish directory."""

    def test_copies_bundle_into_empty_publish_dir(self, project, config):
        publish = project / "build" / "web"
        publish.mkdir(parents=True)

        result = MaintenanceEnabler(config).enable()

        assert result.status == OperationStatus.SUCCESS
        assert (publish / "index.html").read_bytes() == MAINTENANCE_HTML
        assert (publish / "favicon.png").read_bytes() == FAVICON_PNG
        assert _listing(publish) == ["favicon.png", "index.html"]

    def test_creates_missing_publish_dir_with_parents(self, project, config):
        assert not (project / "build").exists()

        MaintenanceEnabler(config).enable()

        assert (project / "build" / "web" / "index.html").is_file()

    def test_running_twice_gives_same_contents(self, project, config):
        publish = project / "build" / "web"

        first = MaintenanceEnabler(config).enable()
        snapshot = {name: (publish / name).read_bytes() for name in _listing(publish)}
        second = MaintenanceEnabler(config).enable()

        assert {name: (publish / name).read_bytes() for name in _listing(publish)} == snapshot
        assert first.checksums == second.checksums

    def test_overwrites_published_files_and_keeps_others(self, project, config):
        publish = project / "build" / "web"
        publish.mkdir(parents=True)
        (publish / "index.html").write_text("<html>live app</html>")
        (publish / "favicon.png").write_bytes(b"old icon")
        (publish / "main.dart.js").write_text("// app")

        result = MaintenanceEnabler(config).enable()

        assert (publish / "index.html").read_bytes() == MAINTENANCE_HTML
        assert (publish / "favicon.png").read_bytes() == FAVICON_PNG
        assert (publish / "main.dart.js").exists()
        assert result.removed == []

    def test_clean_leaves_only_maintenance_site(self, project, config):
        publish = project / "build" / "web"
        (publish / "assets").mkdir(parents=True)
        (publish / "assets" / "font.ttf").write_bytes(b"font")
        (publish / "main.dart.js").write_text("// app")

        result = MaintenanceEnabler(config).enable(clean=True)

        assert _listing(publish) == ["favicon.png", "index.html"]
        assert {p.name for p in result.removed} == {"assets", "main.dart.js"}

    def test_no_staging_directory_left_behind(self, project, config):
        MaintenanceEnabler(config).enable()

        publish = project / "build" / "web"
        assert not [p for p in publish.iterdir() if p.name.startswith(STAGING_DIR_PREFIX)]

    def test_result_reports_installed_paths(self, project, config):
        result = MaintenanceEnabler(config).enable()

        assert result.publish_dir == project / "build" / "web"
        assert list(result.installed) == ["index.html", "favicon.png"]
        assert result.installed["index.html"] == project / "build" / "web" / "index.html"
        assert len(result.checksums["index.html"]) == 64
        assert result.duration is not None


class TestEnableFailures:
    """Missing sources and unwritable targets."""

    def test_missing_document_writes_nothing(self, project, config):
        (project / "web" / "maintenance.html").unlink()

        with pytest.raises(AssetNotFoundError) as exc_info:
            MaintenanceEnabler(config).enable()

        assert "maintenance.html" in str(exc_info.value)
        assert not (project / "build").exists()

    def test_missing_document_is_an_os_error(self, project, config):
        (project / "web" / "maintenance.html").unlink()

        with pytest.raises(OSError):
            MaintenanceEnabler(config).enable()

    def test_missing_icon_leaves_published_document_untouched(self, project, config):
        publish = project / "build" / "web"
        publish.mkdir(parents=True)
        (publish / "index.html").write_text("<html>live app</html>")
        (project / "web" / "favicon.png").unlink()

        with pytest.raises(AssetNotFoundError):
            MaintenanceEnabler(config).enable()

        assert (publish / "index.html").read_text() == "<html>live app</html>"
        assert not (publish / "favicon.png").exists()

    def test_copy_failure_rolls_back_staging(self, project, config, monkeypatch):
        publish = project / "build" / "web"
        publish.mkdir(parents=True)
        (publish / "index.html").write_text("<html>live app</html>")

        real_copy2 = shutil.copy2
        calls = []

        def flaky_copy2(src, dst, *args, **kwargs):
            calls.append(src)
            if len(calls) == 2:
                raise OSError(28, "No space left on device")
            return real_copy2(src, dst, *args, **kwargs)

        monkeypatch.setattr(file_utils.shutil, "copy2", flaky_copy2)

        with pytest.raises(EnableError) as exc_info:
            MaintenanceEnabler(config).enable()

        assert "No space left on device" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert (publish / "index.html").read_text() == "<html>live app</html>"
        assert _listing(publish) == ["index.html"]


class TestEnableAndDeploy:
    """Optional deploy after preparing the files."""

    def test_deploy_runs_deploy_command_in_project_root(self, project, config, fake_runner):
        result = MaintenanceEnabler(config, runner=fake_runner).enable(deploy=True)

        assert fake_runner.calls == [("firebase deploy --only hosting", project)]
        assert result.deploy.command == "firebase deploy --only hosting"

    def test_deploy_failure_propagates_after_files_are_in_place(self, project, config):
        runner = FakeRunner(fail_on=["firebase deploy --only hosting"])

        with pytest.raises(ExternalProcessError):
            MaintenanceEnabler(config, runner=runner).enable(deploy=True)

        assert (project / "build" / "web" / "index.html").read_bytes() == MAINTENANCE_HTML

    def test_deploy_requires_runner(self, config):
        with pytest.raises(ValueError):
            MaintenanceEnabler(config).enable(deploy=True)

    def test_enable_function_without_deploy_runs_nothing(self, project, config):
        result = enable(config)

        assert result.is_success
        assert result.deploy is None
