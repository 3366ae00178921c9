from aws_cdk import Duration
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "booking-pricing"


class Functions(Construct):
    """料金見積もり Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        common_layer: _lambda.LayerVersion,
        discount_settings: dict[str, str],
    ) -> None:
        super().__init__(scope, id)

        self.quote_booking_price = _lambda.Function(
            self,
            "QuoteBookingPriceLambda",
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler="services.booking.handlers.quote.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment={
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                **discount_settings,
            },
        )
