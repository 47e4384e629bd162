import os

# Must run before any session module reads the environment.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ORM"] = "memory"
os.environ.setdefault("LOG_LEVEL", "warning")
