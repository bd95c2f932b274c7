from __future__ import annotations


class SpChartError(ValueError):
    """Base class for all input errors raised while building plot geometry."""


class InvalidUnit(SpChartError):

    def __init__(self, unit):
        self.unit = unit
        super().__init__(f"Unrecognized frequency unit {unit!r}")


class MalformedSeries(SpChartError):

    def __init__(self, index: int | None, reason: str):
        self.index = index
        self.reason = reason
        if index is None:
            super().__init__(f"Malformed series: {reason}")
        else:
            super().__init__(f"Malformed series at index {index}: {reason}")


class UnknownQuantity(SpChartError):

    def __init__(self, key):
        self.key = key
        super().__init__(f"Unknown plot quantity {key!r}")


class InvalidAxisSettings(SpChartError):

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value {value!r} for {field}: {reason}")
