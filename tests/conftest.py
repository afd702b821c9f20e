"""Root conftest — shared test configuration."""

import os

# Trainer output is asserted as plain text
os.environ.setdefault("DOOMSDAY_COLOR", "false")
os.environ.setdefault("DOOMSDAY_LOG_FORMAT", "text")
