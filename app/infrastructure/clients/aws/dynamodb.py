"""DynamoDB client for AWS operations.

Provides access to the DynamoDB operations the translation store needs
(get_item, update_item, delete_item, query, scan) with OperationResult
return types.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider

from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class DynamoDBClient:
    """Client for DynamoDB operations.

    All methods return OperationResult and never raise.

    Args:
        session_provider: SessionProvider instance for credential/config management
        default_role_arn: Role assumed when a call does not pass one
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_role_arn: Optional[str] = None,
    ) -> None:
        self._session_provider = session_provider
        self._default_role_arn = default_role_arn
        self._service_name = "dynamodb"
        self._logger = logger.bind(component="dynamodb_client")

    def _call(
        self, method: str, role_arn: Optional[str], **kwargs: Any
    ) -> OperationResult:
        client_kwargs = self._session_provider.build_client_kwargs(
            service_name=self._service_name,
            role_arn=role_arn or self._default_role_arn,
        )
        return execute_aws_api_call(
            self._service_name,
            method,
            **client_kwargs,
            **kwargs,
        )

    def get_item(
        self,
        table_name: str,
        Key: Dict[str, Any],
        role_arn: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Get an item from DynamoDB.

        Args:
            table_name: Name of the DynamoDB table
            Key: Primary key of the item (e.g., {"locale": {"S": "fr"}, ...})
            role_arn: Optional cross-account role ARN
            **kwargs: Additional DynamoDB get_item parameters

        Returns:
            OperationResult with the raw response ({"Item": ...} when found)
        """
        return self._call(
            "get_item", role_arn, TableName=table_name, Key=Key, **kwargs
        )

    def update_item(
        self,
        table_name: str,
        Key: Dict[str, Any],
        role_arn: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Update (or create) an item in DynamoDB.

        Args:
            table_name: Name of the DynamoDB table
            Key: Primary key of the item
            role_arn: Optional cross-account role ARN
            **kwargs: UpdateExpression, ExpressionAttributeValues, ReturnValues...

        Returns:
            OperationResult with the raw response
        """
        return self._call(
            "update_item", role_arn, TableName=table_name, Key=Key, **kwargs
        )

    def delete_item(
        self,
        table_name: str,
        Key: Dict[str, Any],
        role_arn: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Delete an item from DynamoDB.

        Pass ReturnValues="ALL_OLD" to learn whether an item was removed.
        """
        return self._call(
            "delete_item", role_arn, TableName=table_name, Key=Key, **kwargs
        )

    def query(
        self,
        table_name: str,
        KeyConditionExpression: Any,
        role_arn: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Query all items matching a key condition.

        Pages are followed and flattened, so data is the full list of items.
        """
        return self._call(
            "query",
            role_arn,
            force_paginate=True,
            keys=["Items"],
            TableName=table_name,
            KeyConditionExpression=KeyConditionExpression,
            **kwargs,
        )

    def scan(
        self,
        table_name: str,
        role_arn: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Scan all items from a DynamoDB table (flattened list of items)."""
        return self._call(
            "scan",
            role_arn,
            force_paginate=True,
            keys=["Items"],
            TableName=table_name,
            **kwargs,
        )
