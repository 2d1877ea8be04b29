# IN THIS FILE: THE SINGLE ERROR TYPE RAISED BY THE SIMULATOR


class InvalidInputError(ValueError):
    """
    Raised when a caller passes data the robot cannot act on:
    a bad direction name, a non-numeric coordinate, an illegal
    command character or a malformed placement record.
    """

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)
        self.message = message
