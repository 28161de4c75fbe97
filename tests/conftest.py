"""Pytest global setup for isolated jobsched test state.

This prevents tests from writing config or logs into the real home dir.
"""

from __future__ import annotations

import atexit
import os
from pathlib import Path
import shutil
import tempfile


_TEST_ROOT = Path(tempfile.mkdtemp(prefix="jobsched-pytest-"))

# Force test process (and imported jobsched modules) to use isolated paths.
os.environ["JOBSCHED_HOME"] = str(_TEST_ROOT)
for _name in (
    "JOBSCHED_TITLE",
    "JOBSCHED_THEME",
    "JOBSCHED_LOG_LEVEL",
    "JOBSCHED_LOG_FILE",
):
    os.environ.pop(_name, None)


@atexit.register
def _cleanup_test_state() -> None:
    shutil.rmtree(_TEST_ROOT, ignore_errors=True)
