class DirectoryError(Exception):
    """Base class for failures raised by the directory store."""


class IntegrityViolationError(DirectoryError):
    pass


class DuplicateConstraintError(DirectoryError):
    pass


class InvalidReferenceError(DirectoryError):
    def __init__(self, field, value):
        super().__init__(f"Referenced {field} {value} does not exist")
        self.field = field
        self.value = value


class MissingFieldsError(Exception):
    def __init__(self, fields):
        super().__init__("Missing required fields")
        self.fields = fields
