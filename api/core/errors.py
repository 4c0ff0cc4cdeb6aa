"""
Service error taxonomy.

Services raise these; `main.py` turns them into the JSON error envelope
`{"error": "<message>"}` with the carried status code.
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# The seed source was unreachable or returned something we cannot store.
class UpstreamFetchError(ServiceError):
    pass


# The record store failed on read or write.
class StoreError(ServiceError):
    pass


class InvalidArgument(ServiceError):
    status_code = 400
