from __future__ import annotations

import os

# Must be set before framework_guide.config is imported.
os.environ["DATABASE_URL"] = "sqlite://"
