"""AWS SSM Parameter Store provider."""

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from hydrate.pacts.errors import AccessDeniedError, ParameterNotFoundError, ProviderError
from hydrate.pacts.provider import SecretProvider

_ACCESS_DENIED_CODES = ("AccessDeniedException", "AccessDenied")


class SSMParameterStore(SecretProvider):
    """Fetch (and decrypt) SecureString/String parameters by absolute path.

    Retries and timeouts are left to the boto3 client configuration.
    """
    name = "AWS SSM Parameter Store"

    def __init__(self, client=None, region: str | None = None):
        if client is None:
            session = boto3.session.Session(region_name=region)
            client = session.client("ssm")
        self._client = client

    def get_parameter(self, path: str) -> str:
        try:
            response = self._client.get_parameter(Name=path, WithDecryption=True)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code == "ParameterNotFound":
                raise ParameterNotFoundError(f"parameter {path!r} not found") from exc
            if code in _ACCESS_DENIED_CODES:
                raise AccessDeniedError(f"access denied to parameter {path!r}: {exc}") from exc
            raise ProviderError(f"failed to get parameter {path!r}: {exc}") from exc
        except BotoCoreError as exc:
            raise ProviderError(f"failed to get parameter {path!r}: {exc}") from exc
        return response["Parameter"]["Value"]
