import os
import tempfile

import pytest

# before any login_dfa import, so nothing logs into the source tree
os.environ.setdefault("LOGIN_DFA_LOG_DIR", tempfile.mkdtemp(prefix="login_dfa_logs_"))

from login_dfa.utils.logger import get_logger


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    path = tmp_path / "logs"
    monkeypatch.setenv("LOGIN_DFA_LOG_DIR", str(path))
    get_logger(log_dir=str(path))
    return path
