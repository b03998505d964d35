"""Base AWS call execution for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. This module does not read settings at import time;
configuration is passed in by the caller (see SessionProvider).
"""

import time
from typing import Any, Dict, List, Optional

import boto3  # type: ignore
import structlog
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import (  # type: ignore
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger()

THROTTLING_ERROR_CODES = (
    "ThrottlingException",
    "RequestLimitExceeded",
    "ProvisionedThroughputExceededException",
)
TRANSIENT_ERROR_CODES = THROTTLING_ERROR_CODES + (
    "InternalServerError",
    "ServiceUnavailable",
)
UNAUTHORIZED_ERROR_CODES = (
    "AccessDeniedException",
    "UnrecognizedClientException",
    "ExpiredTokenException",
)
CONNECTION_ERRORS = (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError)


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    role_arn: Optional[str] = None,
    session_name: str = "SiteTranslationsSession",
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'dynamodb')
        session_config: Optional boto3 session kwargs (e.g., region_name)
        client_config: Optional client kwargs (e.g., endpoint_url)
        role_arn: Optional role to assume for cross-account access
        session_name: Name for assumed role session

    Returns:
        botocore client instance
    """
    session_config = session_config or {}
    client_config = client_config or {}

    if role_arn:
        sts = boto3.client("sts")
        assumed = sts.assume_role(RoleArn=role_arn, RoleSessionName=session_name)
        creds = assumed["Credentials"]
        session = boto3.Session(
            aws_access_key_id=creds["AccessKeyId"],
            aws_secret_access_key=creds["SecretAccessKey"],
            aws_session_token=creds["SessionToken"],
            **session_config,
        )
    else:
        session = boto3.Session(**session_config)

    return session.client(service_name, **client_config)


def _calculate_retry_delay(attempt: int, backoff_factor: float = 0.5) -> float:
    return backoff_factor * (2**attempt)


def _call_api_once(
    service_name: str,
    method: str,
    keys: Optional[List[str]],
    role_arn: Optional[str],
    session_config: Optional[Dict[str, Any]],
    client_config: Optional[Dict[str, Any]],
    force_paginate: bool,
    kwargs: Dict[str, Any],
) -> Any:
    client = get_boto3_client(
        service_name,
        session_config=session_config,
        client_config=client_config,
        role_arn=role_arn,
    )

    if force_paginate:
        paginator = client.get_paginator(method)
        results: List[Any] = []
        for page in paginator.paginate(**kwargs):
            for k in keys or ["Items"]:
                if isinstance(page.get(k), list):
                    results.extend(page[k])
        return results

    return getattr(client, method)(**kwargs)


def _map_client_error(e: ClientError) -> OperationResult:
    error_code = e.response.get("Error", {}).get("Code")
    error_message = e.response.get("Error", {}).get("Message", str(e))

    if error_code in TRANSIENT_ERROR_CODES:
        retry_after = None
        try:
            retry_after = int(e.response.get("RetryAfter", 0)) or None
        except (TypeError, ValueError):
            retry_after = None
        return OperationResult.transient_error(
            message=error_message, error_code=error_code, retry_after=retry_after
        )

    if error_code in UNAUTHORIZED_ERROR_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message=error_message, error_code=error_code
        )

    if error_code == "ResourceNotFoundException":
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message=error_message, error_code=error_code
        )

    return OperationResult.permanent_error(message=error_message, error_code=error_code)


def execute_aws_api_call(
    service_name: str,
    method: str,
    keys: Optional[List[str]] = None,
    role_arn: Optional[str] = None,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    max_retries: int = 3,
    force_paginate: bool = False,
    backoff_factor: float = 0.5,
    **kwargs,
) -> OperationResult:
    """Execute an AWS API call with retries and standardized results.

    Transient failures (throttling, dropped connections) are retried with
    exponential backoff; everything else returns immediately. Never raises.

    Args:
        service_name: AWS service name (e.g., 'dynamodb')
        method: Client method name (e.g., 'query')
        keys: Response keys to collect when paginating (default: ["Items"])
        role_arn: Optional role to assume
        session_config: boto3 session kwargs
        client_config: boto3 client kwargs
        max_retries: Retries for transient errors
        force_paginate: Use the method's paginator and flatten pages
        backoff_factor: Base delay for exponential backoff
        **kwargs: Parameters forwarded to the boto3 method

    Returns:
        OperationResult with the raw response (or flattened list) as data
    """
    last_result: Optional[OperationResult] = None

    for attempt in range(max_retries + 1):
        try:
            result = _call_api_once(
                service_name,
                method,
                keys,
                role_arn,
                session_config,
                client_config,
                force_paginate,
                kwargs,
            )
            return OperationResult.success(
                data=result, message=f"{service_name}.{method} succeeded"
            )

        except ClientError as e:
            last_result = _map_client_error(e)
            error = str(e)

        except CONNECTION_ERRORS as e:
            last_result = OperationResult.transient_error(
                message=str(e), error_code=type(e).__name__
            )
            error = str(e)

        except (BotoCoreError, Exception) as e:  # pylint: disable=broad-except
            logger.error(
                "aws_api_unexpected_error",
                service=service_name,
                method=method,
                error=str(e),
            )
            return OperationResult.permanent_error(message=str(e))

        if (
            last_result.status == OperationStatus.TRANSIENT_ERROR
            and attempt < max_retries
        ):
            delay = _calculate_retry_delay(attempt, backoff_factor)
            logger.warning(
                "aws_api_retry",
                service=service_name,
                method=method,
                attempt=attempt + 1,
                error=error,
                delay=delay,
            )
            time.sleep(delay)
            continue

        logger.error(
            "aws_api_error_final",
            service=service_name,
            method=method,
            error=error,
            status=last_result.status.value,
        )
        return last_result

    return last_result or OperationResult.permanent_error(message="unknown_error")
