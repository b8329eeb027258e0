from collections.abc import Generator
from os import environ

import boto3
from moto import mock_aws
from mypy_boto3_dynamodb.client import DynamoDBClient
from pytest import fixture

from ddbformat.schema import build_table_params


@fixture(scope="session", autouse=True)
def aws_credentials() -> None:
    environ["AWS_ACCESS_KEY_ID"] = "testing"
    environ["AWS_SECRET_ACCESS_KEY"] = "testing"  # noqa: S105
    environ["AWS_SECURITY_TOKEN"] = "testing"  # noqa: S105
    environ["AWS_SESSION_TOKEN"] = "testing"  # noqa: S105
    environ["AWS_DEFAULT_REGION"] = "us-east-1"


@fixture
def client(aws_credentials: None) -> Generator[DynamoDBClient, None, None]:
    with mock_aws():
        yield boto3.client("dynamodb", region_name="us-east-1")


@fixture
def pk_table(client: DynamoDBClient) -> str:
    client.create_table(**build_table_params("PKTable", {"name": "id", "type": "S"}))
    return "PKTable"


@fixture
def pk_sk_table(client: DynamoDBClient) -> str:
    client.create_table(
        **build_table_params(
            "PKSKTable",
            {"name": "id", "type": "S"},
            {"name": "sort", "type": "N"},
        )
    )
    return "PKSKTable"
