"""Shared repository base helpers."""
from mindful_campus.db.gateway import PersistenceGateway


class BaseRepository:
    """Base repository holding the persistence gateway."""

    def __init__(self, gateway: PersistenceGateway):
        self.gateway = gateway
