from .logger import RequestLogger  # noqa: F401
