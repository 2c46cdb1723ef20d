class ClassbookError(Exception):
    """Base error for the classbook applications."""


class LoadFailure(ClassbookError):
    def __init__(self, filepath, reason):
        self.filepath = filepath
        self.reason = reason
        super().__init__(f"Error loading CSV file '{filepath}': {reason}")


class SaveFailure(ClassbookError):
    def __init__(self, filepath, reason):
        self.filepath = filepath
        self.reason = reason
        super().__init__(f"Error saving CSV file '{filepath}': {reason}")


class ValidationError(ClassbookError):
    def __init__(self, field, message):
        self.field = field
        super().__init__(message)
