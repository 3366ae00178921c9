from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications import QuoteBookingPriceService
from services.booking.domain.factory import PricedDayFactory
from services.booking.domain.service import PricingService
from services.booking.domain.value_object import HomestayId
from services.booking.handlers.request_models import QuoteBookingPriceRequest
from services.booking.handlers.response_models import ErrorResponse, to_response
from services.booking.infrastructure import load_discount_policy
from services.shared.utils import api_response, get_logger

logger = get_logger()

pricing_service = PricingService(discount_policy=load_discount_policy())
factory = PricedDayFactory()
service = QuoteBookingPriceService(pricing_service=pricing_service, factory=factory)


def _error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return api_response(
        status_code,
        ErrorResponse(error_code=error_code, message=message, details=details),
    )


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約料金見積もり Lambda Handler"""
    try:
        request = QuoteBookingPriceRequest.model_validate_json(
            event.decoded_body or ""
        )
    except ValidationError as e:
        logger.warning("Invalid quote request", extra={"errors": e.error_count()})
        return _error_response(
            400,
            "VALIDATION_ERROR",
            "Invalid request body",
            e.errors(include_url=False, include_context=False, include_input=False),
        )

    logger.info(
        "Received quote booking price request",
        extra={"homestay_id": request.homestay_id, "nights": len(request.days)},
    )

    try:
        homestay_id = (
            HomestayId(value=request.homestay_id) if request.homestay_id else None
        )
        price = service.quote(request.to_priced_day_details(), homestay_id)
    except ValueError as e:
        logger.warning("Rejected quote request", extra={"reason": str(e)})
        return _error_response(400, "INVALID_REQUEST", str(e))
    except Exception:
        logger.exception("Failed to quote booking price")
        return _error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, to_response(price))
