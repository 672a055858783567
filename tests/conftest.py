"""Keep test runs from writing logs into the project tree."""

import os
import tempfile

os.environ.setdefault("TIMEWORTH_LOG_DIR", tempfile.mkdtemp(prefix="timeworth_logs_"))
