from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Functions, Layers

# CDK context キー -> Lambda 環境変数
DISCOUNT_CONTEXT_KEYS = {
    "weekly_discount_rate": "WEEKLY_DISCOUNT_RATE",
    "monthly_discount_rate": "MONTHLY_DISCOUNT_RATE",
    "weekly_min_nights": "WEEKLY_MIN_NIGHTS",
    "monthly_min_nights": "MONTHLY_MIN_NIGHTS",
}


class BookingPricingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            common_layer=layers.common_layer,
            discount_settings=self._discount_settings(),
        )

        api = Api(
            self,
            "Api",
            quote_booking_price=fns.quote_booking_price,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)

    def _discount_settings(self) -> dict[str, str]:
        """cdk.json / -c で指定された割引設定を環境変数に変換する"""
        settings = {}
        for context_key, env_name in DISCOUNT_CONTEXT_KEYS.items():
            value = self.node.try_get_context(context_key)
            if value is not None:
                settings[env_name] = str(value)
        return settings
