"""
Main CDK Stack for the entry CRUD API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class EntryCrudStack(Stack):
    """Main stack wiring the table and the API together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        Tags.of(self).add("Project", "entry-crud")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
            point_in_time_recovery=settings.point_in_time_recovery,
        )

        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            table_name=data_construct.entries_table.table_name,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
            log_level=settings.log_level,
        )

        # Each function only gets the access its operation needs.
        data_construct.entries_table.grant_write_data(api_construct.put_lambda)
        data_construct.entries_table.grant_read_data(api_construct.get_lambda)

        # Output keys are read back by infrastructure.stack_outputs.
        CfnOutput(self, "Table", value=data_construct.entries_table.table_name)
        CfnOutput(self, "API", value=api_construct.api.api_endpoint)
