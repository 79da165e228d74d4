"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from commitit.config import MessageSource, Settings
from commitit.session import Session


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture(autouse=True)
def isolated_config(temp_dir, monkeypatch):
    """Point the global config at a temp directory and clear env overrides."""
    config_dir = temp_dir / ".commitit"
    monkeypatch.setattr("commitit.global_config._CONFIG_DIR", config_dir)
    for var in (
        "COMMITIT_MESSAGE_SOURCE",
        "COMMITIT_DELEGATE_URL",
        "COMMITIT_DELEGATE_TIMEOUT",
        "COMMITIT_DELEGATE_TOKEN",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("commitit.config.load_dotenv", lambda *args, **kwargs: False)
    return config_dir


@pytest.fixture
def local_session(mock_repo_root):
    """Session using local message composition."""
    return Session(
        working_dir=mock_repo_root,
        repo_root=mock_repo_root,
        settings=Settings(),
    )


@pytest.fixture
def delegate_session(mock_repo_root):
    """Session using the delegate endpoint."""
    return Session(
        working_dir=mock_repo_root,
        repo_root=mock_repo_root,
        settings=Settings(
            message_source=MessageSource.DELEGATE,
            delegate_url="http://delegate.test/generate",
        ),
    )


@pytest.fixture
def sample_diff():
    """Sample staged diff touching two files."""
    return """diff --git a/src/new_file.py b/src/new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/src/new_file.py
@@ -0,0 +1,5 @@
+def hello():
+    print("Hello, world!")
+
+def goodbye():
+    print("Goodbye!")
diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""


@pytest.fixture
def sample_porcelain_status():
    """Sample `git status --porcelain=v1 -z` output."""
    return "\0".join([
        " M src/app.py",
        "M  README.md",
        "A  docs/new.md",
        "?? notes.txt",
        "R  renamed.py",
        "original.py",
        " D removed.py",
        "",
    ])


def _completed_process(stdout: str = "", returncode: int = 0) -> MagicMock:
    result = MagicMock()
    result.stdout = stdout
    result.stderr = ""
    result.returncode = returncode
    return result


@pytest.fixture
def completed_process():
    """Factory for stand-ins of subprocess.CompletedProcess."""
    return _completed_process


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    mock_run.return_value = _completed_process()
    return mock_run
