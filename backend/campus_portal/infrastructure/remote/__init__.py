from .callback_remote_service import CallbackRemoteDataService
from .http_remote_service import HttpRemoteDataService
from .store_factory import build_collection_store
from .store_sync import refresh_store

__all__ = [
    "CallbackRemoteDataService",
    "HttpRemoteDataService",
    "build_collection_store",
    "refresh_store",
]
