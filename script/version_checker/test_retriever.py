import os

import pytest

from version_checker.database import DatabaseFamily, InstalledVersion, SemanticVersion
from version_checker.retriever import VersionRetriever
from version_checker.utils.command import Shell
from version_checker.utils.exception import ExecutionError, UnrecognizedBannerError


class FakeCommand(object):
    def __init__(self, stat=0, output='', error=None):
        self.stat = stat
        self.output = output
        self.error = error
        self.calls = []

    def __call__(self, argv, env):
        self.calls.append((argv, env))
        if self.error is not None:
            raise self.error
        return self.stat, self.output


def test_version():
    command = FakeCommand(output="postgres (Greenplum Database) 6.26.0 build commit:abc\n")
    retriever = VersionRetriever(command)

    assert retriever.version("/usr/local/gpdb") == \
        InstalledVersion(DatabaseFamily.GREENPLUM, SemanticVersion(6, 26, 0))
    assert command.calls == [([os.path.join("/usr/local/gpdb", "bin", "postgres"), "--gp-version"], {})]


def test_banner_returns_raw_output():
    output = "postgres (Apache Cloudberry) 2.0.0 build 1\n"
    assert VersionRetriever(FakeCommand(output=output)).banner("/opt/cbdb") == output


def test_version_command_fails():
    command = FakeCommand(stat=127, output="postgres: error while loading shared libraries")
    with pytest.raises(ExecutionError) as e:
        VersionRetriever(command).version("/usr/local/gpdb")

    assert e.value.stat == 127
    assert e.value.output == "postgres: error while loading shared libraries"
    assert "/usr/local/gpdb/bin/postgres --gp-version" in e.value.cmd
    assert "127" in str(e.value)


def test_version_command_cannot_start():
    command = FakeCommand(error=FileNotFoundError(2, "No such file or directory"))
    with pytest.raises(ExecutionError) as e:
        VersionRetriever(command).version("/nonexistent")

    assert e.value.stat is None
    assert "No such file or directory" in e.value.output


def test_version_bad_banner():
    with pytest.raises(UnrecognizedBannerError):
        VersionRetriever(FakeCommand(output="postgres (PostgreSQL) 14.1")).version("/usr/pgsql")


def test_default_command():
    assert VersionRetriever()._command is not None
    assert VersionRetriever.version_command("/gp") == ["/gp/bin/postgres", "--gp-version"]


def make_installation(tmp_path, script):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    postgres = bin_dir / "postgres"
    postgres.write_text("#!/bin/sh\n" + script)
    os.chmod(str(postgres), 0o755)
    return str(tmp_path)


def test_shell_run_combined_output_and_empty_env(tmp_path):
    home = make_installation(tmp_path,
                             'echo "postgres (Greenplum Database) 6.26.0 build x"\n'
                             'echo "err" 1>&2\n'
                             'echo "home=${HOME-unset} lang=${LANG-unset} arg=$1"\n')

    stat, output = Shell.run(VersionRetriever.version_command(home), {})
    assert stat == 0
    assert output == "postgres (Greenplum Database) 6.26.0 build x\nerr\nhome=unset lang=unset arg=--gp-version\n"

    assert VersionRetriever().version(home) == \
        InstalledVersion(DatabaseFamily.GREENPLUM, SemanticVersion(6, 26, 0))


def test_shell_run_exit_status(tmp_path):
    home = make_installation(tmp_path, 'echo "fatal: cannot start" 1>&2\nexit 3\n')

    with pytest.raises(ExecutionError) as e:
        VersionRetriever().version(home)
    assert e.value.stat == 3
    assert e.value.output == "fatal: cannot start\n"


def test_missing_binary_with_default_command(tmp_path):
    with pytest.raises(ExecutionError) as e:
        VersionRetriever().version(str(tmp_path))
    assert e.value.stat is None


def test_output_not_utf8(tmp_path):
    home = make_installation(tmp_path, "printf 'postgres (Greenplum Database) 6.26.0 \\377\\376\\n'\n")

    assert "�" in VersionRetriever().banner(home)
    assert VersionRetriever().version(home) == \
        InstalledVersion(DatabaseFamily.GREENPLUM, SemanticVersion(6, 26, 0))
