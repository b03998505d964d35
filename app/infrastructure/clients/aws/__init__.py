"""Infrastructure AWS clients public API.

The translation store talks to DynamoDB through DynamoDBClient, which shares
a SessionProvider for region, endpoint and role configuration:

    from infrastructure.clients.aws import DynamoDBClient, SessionProvider

    client = DynamoDBClient(SessionProvider(region="ca-central-1"))
    result = client.query(
        "site_translations",
        KeyConditionExpression="#locale = :locale",
        ExpressionAttributeNames={"#locale": "locale"},
        ExpressionAttributeValues={":locale": {"S": "fr"}},
    )
    if result.is_success:
        items = result.data
"""

from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.clients.aws.session_provider import SessionProvider

__all__ = [
    "SessionProvider",
    "DynamoDBClient",
]
