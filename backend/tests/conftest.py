"""
Point the app at a throwaway SQLite file and create the schema before any
test module imports liftlog.db (the engine is built at import time).
"""
import os
import tempfile

os.environ["DB_URL"] = "sqlite:///" + os.path.join(tempfile.mkdtemp(prefix="liftlog-tests-"), "test.db")
os.environ["PROGRAM_START_DATE"] = "2025-11-26"

from liftlog.db import Base, engine  # noqa: E402
from liftlog import models  # noqa: E402,F401

Base.metadata.create_all(engine)
