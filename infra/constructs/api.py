from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        quote_booking_price: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingPricingRestApi",
            rest_api_name="Booking Pricing API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
        )

        # POST /quotes -> Lambda (quote_booking_price)
        quotes_resource = self.rest_api.root.add_resource("quotes")
        quotes_resource.add_method(
            "POST",
            apigw.LambdaIntegration(quote_booking_price),
        )
