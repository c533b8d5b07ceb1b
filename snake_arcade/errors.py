"""Exception types."""


class SnakeError(Exception):
    pass


class ConfigError(SnakeError, ValueError):
    """Raised for configuration values outside their accepted range."""


class BoardFullError(SnakeError):
    """Raised when no free cell is left to place food on."""

    def __init__(self, dimension: int):
        super().__init__(f"no free cell left on a {dimension}x{dimension} grid")
        self.dimension = dimension
