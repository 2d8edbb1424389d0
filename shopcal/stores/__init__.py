from shopcal.stores.base import DataSource
from shopcal.stores.errors import NotFoundError, StoreError, ValidationError
from shopcal.stores.mock import MockDataSource
from shopcal.stores.remote import RemoteDataSource

__all__ = [
    "DataSource",
    "MockDataSource",
    "RemoteDataSource",
    "StoreError",
    "ValidationError",
    "NotFoundError",
]
