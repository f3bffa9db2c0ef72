class ExtractionError(Exception):
    """Raised by a document adapter when text extraction fails.

    ``partial_text`` carries whatever text was recovered before the failure.
    """

    def __init__(self, message: str, partial_text: str = "") -> None:
        super().__init__(message)
        self.partial_text = partial_text
