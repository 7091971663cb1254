from ownership.api.main import app  # noqa: F401
