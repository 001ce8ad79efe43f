class DecaesarError(ValueError):
    """Base class for every error raised by the cipher core."""


class EmptyInputError(DecaesarError):

    def __init__(self):
        super().__init__("Input is empty")


class OutputTooSmallError(DecaesarError):

    def __init__(self, required: int, provided: int):
        self.required = required
        self.provided = provided
        super().__init__(f"Output buffer too small: required {required} bytes, provided {provided}")


class InvalidShiftError(DecaesarError):

    def __init__(self, shift: int):
        self.shift = shift
        super().__init__(f"Invalid shift: {shift} (must be 0..25)")
