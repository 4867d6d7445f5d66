class NotPlainTextError(Exception):
    """
    Exception raised when a file is not classified as plain text.

    This exception is raised while streaming file contents for a file whose extension
    and guessed media type do not indicate human-readable content. It is reported as a
    warning at the CLI level and the file is skipped.

    Attributes:
        file_path (str): Path to the file that was skipped.

    Example:
        >>> error = NotPlainTextError("assets/logo.png")
        >>> str(error)
        'assets/logo.png is not plain text, skipping'
    """

    def __init__(self, file_path: str) -> None:
        """
        Initialize the exception with the path to the skipped file.

        Args:
            file_path (str): Path to the file that was skipped.
        """
        self.file_path = file_path
        super().__init__(f"{file_path} is not plain text, skipping")
