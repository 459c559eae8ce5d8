class StoreError(Exception):
    """Base class for errors raised by the entity store"""


class ReferencedEntityNotFound(StoreError):
    """A record points at another record that does not exist"""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class InvalidStatusError(StoreError, ValueError):
    def __init__(self, status, allowed):
        self.status = status
        self.allowed = list(allowed)
        super().__init__(f"Invalid status '{status}', expected one of: {', '.join(self.allowed)}")


class DuplicateKeyError(StoreError):
    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} '{key}' already exists")
