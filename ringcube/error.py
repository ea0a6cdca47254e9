class InvalidFaceException(Exception):
    """ Exception raised when a face is not exactly eight colors """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class InvalidCubeException(Exception):
    """ Exception raised when a cube cannot be built from the given faces """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class InvalidColorSchemeException(Exception):
    """ Exception raised when a color scheme does not map every color to its own glyph """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
