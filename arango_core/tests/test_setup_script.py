"""Tests for scripts/arangodb.sh with the external tools stubbed out."""

import os
import shutil
import stat
import subprocess

import pytest

SCRIPT = os.path.join(
    os.path.dirname(__file__), os.pardir, os.pardir, 'scripts', 'arangodb.sh'
)

pytestmark = pytest.mark.skipif(
    shutil.which('bash') is None or not os.path.exists(SCRIPT),
    reason='needs bash and a source checkout'
)


def write_executable(path, content):
    path.write_text('#!/bin/bash\n' + content)
    path.chmod(path.stat().st_mode | stat.S_IEXEC)


@pytest.fixture
def workspace(tmp_path):
    scripts = tmp_path / 'scripts'
    scripts.mkdir()
    shutil.copy(SCRIPT, str(scripts / 'arangodb.sh'))

    stubs = tmp_path / 'stubs'
    stubs.mkdir()
    log = tmp_path / 'arangod.args'
    write_executable(stubs / 'wget', 'exit 0\n')
    # The tarball unpacks straight into ArangoDB-$VERSION
    write_executable(stubs / 'tar', (
        'mkdir -p "ArangoDB-$VERSION/bin"\n'
        'cat > "ArangoDB-$VERSION/bin/arangod_x86_64" <<STUB\n'
        '#!/bin/bash\n'
        'echo "\\$@" > {log}\n'
        'STUB\n'
        'chmod +x "ArangoDB-$VERSION/bin/arangod_x86_64"\n'
    ).format(log=log))
    write_executable(stubs / 'pgrep', 'exit 0\n')
    write_executable(stubs / 'curl', 'exit 0\n')
    return tmp_path


def run_script(workspace):
    env = dict(os.environ)
    env['VERSION'] = '1.4.0'
    env['PATH'] = str(workspace / 'stubs') + os.pathsep + env['PATH']
    return subprocess.run(
        ['bash', str(workspace / 'scripts' / 'arangodb.sh')],
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        timeout=60
    )


def data_directory(workspace):
    args = (workspace / 'arangod.args').read_text().split()
    return args[args.index('--database.directory') + 1]


def test_tarball_unpacked_in_place(workspace):
    result = run_script(workspace)
    assert result.returncode == 0, result.stderr
    assert b'ArangoDB is up' in result.stdout
    assert (workspace / 'scripts' / 'ArangoDB-1.4.0').is_dir()


def test_fresh_data_directory(workspace):
    assert run_script(workspace).returncode == 0
    first = data_directory(workspace)
    assert run_script(workspace).returncode == 0
    second = data_directory(workspace)
    try:
        assert first != second
        assert os.listdir(second) == []
    finally:
        shutil.rmtree(first, ignore_errors=True)
        shutil.rmtree(second, ignore_errors=True)
