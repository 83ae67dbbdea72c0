"""Identity verification HTTP client"""

import httpx
from loan_gateway.domain.exceptions import IdentityServiceError
from loan_gateway.config import settings


class HttpIdentityTransport:
    """Transport for the external identity verification API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        self.base_url = base_url or settings.identity_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.timeout)

    def call_service(self, applicant_name: str, applicant_age: int, applicant_address: str) -> bool:
        """
        Ask the identity service whether the applicant is who they claim to be.

        Raises:
            IdentityServiceError: On timeout, HTTP errors, or invalid response
        """
        try:
            response = self._client.post(
                f"{self.base_url}/identity/verify",
                json={
                    "name": applicant_name,
                    "age": applicant_age,
                    "address": applicant_address,
                },
            )
            response.raise_for_status()
            verified = response.json()["verified"]

        except httpx.TimeoutException as e:
            raise IdentityServiceError(f"Identity API timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise IdentityServiceError(f"Identity API error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise IdentityServiceError(f"Identity API unreachable: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise IdentityServiceError(f"Invalid verification data from identity API: {e}") from e

        if not isinstance(verified, bool):
            raise IdentityServiceError(f"Invalid verification flag from identity API: {verified!r}")
        return verified

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpIdentityTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
