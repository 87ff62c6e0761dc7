__all__ = (
    "ConfigurationError",
    "InvalidActionError",
    "InvalidOperationError",
    "ReentrancyError",
    "StoreError",
)


class StoreError(Exception):
    pass


class ConfigurationError(StoreError, TypeError):
    pass


class InvalidActionError(StoreError, TypeError):
    pass


class InvalidOperationError(StoreError, TypeError):
    pass


class ReentrancyError(StoreError, RuntimeError):
    pass
