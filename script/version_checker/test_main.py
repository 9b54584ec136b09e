import os

import pytest

from version_checker.database import parse_installed_version
from version_checker.log import logger
from version_checker.main import main
from version_checker.project import CheckProj, ProjectFactory, ShowProj
from version_checker.retriever import VersionRetriever
from version_checker.utils.exception import ParamParseException
from version_checker.utils.param import Action, Param


def fake_command(argv, env):
    return 0, "postgres (Apache Cloudberry) 2.0.0 build 1\n"


def test_param_check():
    param = Param(["gp_versionchk", "check", "-s", "/usr/local/gpdb5", "--target-home", "/usr/local/gpdb6", "-d"])
    assert param.error is None
    assert param.action == Action.CHECK
    assert param.source_home.value == "/usr/local/gpdb5"
    assert param.target_home.value == "/usr/local/gpdb6"
    assert param.source_version.value is None
    assert param.debug.value is True

    param = Param(["gp_versionchk", "verify", "-S", "Greenplum 6.1.0", "-T", "Greenplum 7.0.0"])
    assert param.action == Action.CHECK
    assert param.source_version.value == "Greenplum 6.1.0"


def test_param_errors():
    for argv in [["gp_versionchk", "upgrade"],
                 ["gp_versionchk", "check", "-s", "/a"],
                 ["gp_versionchk", "check", "-x"],
                 ["gp_versionchk", "check", "-s", "/a", "-t", "/b", "extra"],
                 ["gp_versionchk", "show"]]:
        param = Param(argv)
        assert param.is_help()
        assert param.error is not None


def test_param_help():
    for argv in [["gp_versionchk"], ["gp_versionchk", "help"], ["gp_versionchk", "-?"]]:
        param = Param(argv)
        assert param.is_help()
        assert param.error is None


def test_main_check():
    assert main(["gp_versionchk", "check", "-S", "Greenplum 5.29.10", "-T", "Greenplum 6.0.0"]) == 0
    assert main(["gp_versionchk", "check", "-S", "Greenplum 5.29.9", "-T", "Greenplum 6.0.0"]) == 1
    assert main(["gp_versionchk", "check", "-S", "Greenplum 6.0.0", "-T", "Cloudberry 6.0.0"]) == 1
    assert main(["gp_versionchk", "check", "-S", "Postgres 6.0.0", "-T", "Greenplum 6.0.0"]) == 1


def test_main_usage():
    assert main(["gp_versionchk", "help"]) == 0
    assert main(["gp_versionchk", "check"]) == 2


def test_main_log_file(tmp_path, capsys):
    log_file = str(tmp_path / "check.log")
    assert main(["gp_versionchk", "check", "-S", "Greenplum 6.3.0", "-T", "Greenplum 8.0.0",
                 "-l", log_file]) == 1

    with open(log_file) as f:
        content = f.read()
    assert "[ERROR]" in content
    assert "Greenplum 6.3.0" in content
    assert "Greenplum 8.0.0" in content
    assert "[ERROR]" in capsys.readouterr().out


def test_check_project_with_homes(capsys):
    param = Param(["gp_versionchk", "check", "-s", "/opt/cbdb1", "-T", "Cloudberry 1.0.0"])
    project = ProjectFactory.produce(param, VersionRetriever(fake_command))
    assert isinstance(project, CheckProj)
    project.init()
    assert project.run() == 1
    project.close()

    param = Param(["gp_versionchk", "check", "-S", "Cloudberry 1.6.0", "-t", "/opt/cbdb2"])
    project = ProjectFactory.produce(param, VersionRetriever(fake_command))
    project.init()
    assert project.run() == 0
    project.close()
    assert "Upgrade from Cloudberry 1.6.0 to Cloudberry 2.0.0 is supported." in capsys.readouterr().out


def test_show_project(capsys):
    param = Param(["gp_versionchk", "show", "-g", "/opt/cbdb"])
    project = ProjectFactory.produce(param, VersionRetriever(fake_command))
    assert isinstance(project, ShowProj)
    project.init()
    assert project.run() == 0
    project.close()

    out = capsys.readouterr().out.strip()
    assert parse_installed_version(out) == parse_installed_version("Cloudberry 2.0.0")


def test_logger_debug(tmp_path):
    log_file = str(tmp_path / "debug.log")
    logger.set_file(log_file)
    logger.set_debug(False)
    logger.debug("hidden message")
    logger.set_debug(True)
    logger.debug("shown message", hint="some hint")
    logger.set_debug(False)
    logger.close()

    with open(log_file) as f:
        content = f.read()
    assert os.path.exists(log_file)
    assert "hidden message" not in content
    assert "[DEBUG] shown message" in content
    assert "HINT: some hint" in content


def test_main_log_file_cannot_open(tmp_path, capsys):
    log_file = str(tmp_path / "nodir" / "check.log")
    assert main(["gp_versionchk", "check", "-S", "Greenplum 6.0.0", "-T", "Greenplum 7.0.0",
                 "-l", log_file]) == 1

    out = capsys.readouterr().out
    assert "[ERROR]" in out
    assert "cannot open log file" in out
    assert not os.path.exists(log_file)


def test_project_factory_unknown_action():
    param = Param(["gp_versionchk", "check", "-S", "Greenplum 6.0.0", "-T", "Greenplum 7.0.0"])
    param.action = Action.HELP
    with pytest.raises(ParamParseException):
        ProjectFactory.produce(param)
