"""Hash collaborator backed by an HTTP keyed-hash service."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

if TYPE_CHECKING:
    from .hashing import HashAlgorithm

_EXPONENTIAL_MAX = 10
_EXPONENTIAL_MIN = 1
_MAX_ATTEMPTS = 3


class HashServiceError(RuntimeError):
    """Raised when the hash service cannot produce a digest."""


class RetriableHashServiceError(HashServiceError):
    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        super().__init__(f"Retriable hash service error: {response.status_code}")


class RemoteHasher:
    """Delegate ``hash(algorithm, secret, message)`` to a service endpoint.

    The service receives ``{"algorithm": ..., "message": ...}`` with the secret
    as a bearer token and must answer ``{"hash": "<hex digest>"}``.
    """

    def __init__(self, client: httpx.Client, endpoint: str) -> None:
        self._client = client
        self._endpoint = endpoint

    def __call__(self, algorithm: HashAlgorithm, secret: str, message: str) -> str:
        payload = {"algorithm": algorithm.value, "message": message}
        headers = {"Authorization": f"Bearer {secret}"}

        for attempt in Retrying(
            retry=retry_if_exception_type((httpx.TimeoutException, RetriableHashServiceError)),
            wait=wait_exponential(multiplier=_EXPONENTIAL_MIN, max=_EXPONENTIAL_MAX),
            stop=stop_after_attempt(_MAX_ATTEMPTS),
            reraise=True,
        ):
            with attempt:
                response = self._client.post(self._endpoint, json=payload, headers=headers)
                if response.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
                    raise RetriableHashServiceError(response)
                if response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
                    raise RetriableHashServiceError(response)

        if response.status_code != HTTPStatus.OK:
            msg = f"hash service returned {response.status_code}"
            raise HashServiceError(msg)

        try:
            digest = response.json()["hash"]
        except (ValueError, KeyError, TypeError) as exc:
            msg = "hash service returned an invalid body"
            raise HashServiceError(msg) from exc
        if not isinstance(digest, str) or not digest:
            msg = "hash service returned an invalid body"
            raise HashServiceError(msg)
        return digest
