class InvalidInputError(ValueError):
    """A required customer field is missing or malformed."""


class NotFoundError(ValueError):
    def __init__(self, resource: str, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
