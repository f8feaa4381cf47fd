class SignatureError(ValueError):
    """Raised when a signature cannot be built from a malformed tree."""


class InvalidSignatureRangeError(SignatureError):
    def __init__(self, start: int, end: int, text: str) -> None:
        self.start = start
        self.end = end
        self.text = text
        super().__init__(f"Error building function signature with range {start} - {end} for element: {text}")
