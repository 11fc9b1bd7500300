"""Root conftest — shared test configuration."""

import os

# Keep test output readable and never pick up a developer's doc roots
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("BACKEND_DOCS_DIR", "/nonexistent/backend")
os.environ.setdefault("FRONTEND_DOCS_DIR", "/nonexistent/frontend")
