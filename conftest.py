"""
Root conftest - shared pytest configuration.
Ensures the cloud_saas package is importable when running pytest from the
project root, and provides the two required settings so that importing
cloud_saas.main (which builds the app at import time) does not abort.
"""
import os
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET", "test_secret_key_for_testing_only")
