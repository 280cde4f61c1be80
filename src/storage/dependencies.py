from fastapi import Request

from src.storage.base import StorageBackend


def get_storage(request: Request) -> StorageBackend:
    return request.app.state.storage
