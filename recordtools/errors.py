"""Exception type raised by the record tools."""


class RecordError(Exception):
    """Raised when a record operation cannot be carried out."""