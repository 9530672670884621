class InvariantViolation(Exception):
    """
    Raised when a write would break a content rule
    (duplicate slug, orphaned hierarchy, last admin removed, ...).

    `field` names the offending input when there is one, so the
    error handler can report it next to the validation errors.
    """

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field
