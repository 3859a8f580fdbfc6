from ._settings import ENV_PREFIX, STDIN_SENTINEL, Settings

__all__ = ["ENV_PREFIX", "STDIN_SENTINEL", "Settings"]
