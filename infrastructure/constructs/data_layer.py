"""
Data layer construct: DynamoDB entries table.
"""

from aws_cdk import (
    RemovalPolicy,
    aws_dynamodb as dynamodb,
)
from constructs import Construct


class DataLayerConstruct(Construct):
    """Provision the entries table."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        point_in_time_recovery: bool = False,
    ) -> None:
        super().__init__(scope, construct_id)

        self.entries_table = dynamodb.Table(
            self,
            "Entries",
            partition_key=dynamodb.Attribute(name="id", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=point_in_time_recovery,
            removal_policy=RemovalPolicy.RETAIN if environment == "prod" else RemovalPolicy.DESTROY,
        )
