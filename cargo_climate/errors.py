# Exceptions raised at the I/O boundary (cargo invocation, report output).


class CargoClimateError(Exception):
    """Base class for fatal errors of a cargo-climate run."""


class CargoError(CargoClimateError):
    """cargo could not be started."""


class ReportWriteError(CargoClimateError):
    """The report could not be written to its destination."""


class InputReadError(CargoClimateError):
    """A saved cargo message stream could not be read."""
