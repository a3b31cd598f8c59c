class SeatSelectorError(Exception):
    """Base class for errors surfaced to the host environment"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SeatNotFoundError(SeatSelectorError):
    status_code = 404

    def __init__(self, code: str):
        super().__init__(f"Seat {code} does not exist")
        self.code = code


class SeatOccupiedError(SeatSelectorError):
    status_code = 409

    def __init__(self, code: str):
        super().__init__(f"Seat {code} is occupied")
        self.code = code


class UnknownSectorError(SeatSelectorError):
    status_code = 400

    def __init__(self, sector: str):
        super().__init__(f"Unknown sector '{sector}'")
        self.sector = sector


class EmptySelectionError(SeatSelectorError):
    status_code = 400

    def __init__(self):
        super().__init__("Please select at least one seat.")


class BookingStepNotOpenError(SeatSelectorError):
    status_code = 409

    def __init__(self):
        super().__init__("Booking step is not open")


class BookingInProgressError(SeatSelectorError):
    status_code = 409

    def __init__(self):
        super().__init__("Finish or cancel the booking step before changing seats")
