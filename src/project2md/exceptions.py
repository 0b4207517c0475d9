class InvalidRootError(Exception):
    """
    Exception raised when the directory to document is missing or is not a directory.

    This is the only failure that aborts a documentation run. It is raised once, before
    any traversal starts; every later filesystem problem degrades to a default value.

    Attributes:
        path (str): The root path that was rejected.
        reason (str): Short description of what is wrong with the path.

    Example:
        >>> error = InvalidRootError("/no/such/dir", "does not exist")
        >>> str(error)
        'Path not found or not a directory: /no/such/dir (does not exist)'
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (str): The root path that was rejected.
            reason (str): Short description of the problem.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Path not found or not a directory: {path} ({reason})")


class ConfigurationError(Exception):
    """
    Exception raised when a configuration file cannot be read or has the wrong shape.

    Example:
        >>> error = ConfigurationError("project2md.yaml: top level must be a mapping")
        >>> str(error)
        'project2md.yaml: top level must be a mapping'
    """

    pass
