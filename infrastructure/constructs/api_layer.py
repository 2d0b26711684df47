"""
API layer construct: one Lambda per entry operation behind an HTTP API.
"""

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct


class ApiLayerConstruct(Construct):
    """Expose PUT /{id} and GET /{id}."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        table_name: str,
        lambda_memory_mb: int = 128,
        lambda_timeout_seconds: int = 10,
        log_level: str = "INFO",
    ) -> None:
        super().__init__(scope, construct_id)

        # Both functions share one asset; the handler string picks the module.
        # pydantic and python-json-logger are not in the Lambda runtime, so
        # they are installed into the asset with Docker bundling.
        code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )
        function_env = {
            "ENVIRONMENT": environment,
            "TABLE_NAME": table_name,
            "LOG_LEVEL": log_level,
        }

        self.put_lambda = self._function(
            "PutEntry",
            "handlers.put_entry.lambda_handler",
            code,
            function_env,
            lambda_memory_mb,
            lambda_timeout_seconds,
        )
        self.get_lambda = self._function(
            "GetEntry",
            "handlers.get_entry.lambda_handler",
            code,
            function_env,
            lambda_memory_mb,
            lambda_timeout_seconds,
        )

        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"entry-crud-api-{environment}",
        )

        route_defs = [
            (apigw.HttpMethod.PUT, "/{id}", self.put_lambda),
            (apigw.HttpMethod.GET, "/{id}", self.get_lambda),
        ]

        for method, path, function in route_defs:
            self.api.add_routes(
                path=path,
                methods=[method],
                integration=integrations.HttpLambdaIntegration(
                    f"{function.node.id}Integration", function
                ),
            )

    def _function(
        self,
        construct_id: str,
        handler: str,
        code: _lambda.Code,
        environment: dict,
        memory_mb: int,
        timeout_seconds: int,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            construct_id,
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler=handler,
            code=code,
            memory_size=memory_mb,
            timeout=Duration.seconds(timeout_seconds),
            architecture=_lambda.Architecture.ARM_64,
            environment=environment,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )
