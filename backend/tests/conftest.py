import os
import sys


# Tests import `backend.app.*`; make the repo root importable when pytest is
# started from `backend/` without an editable install.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
