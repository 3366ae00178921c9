#!/usr/bin/env python3

import aws_cdk as cdk

from booking_pricing_stack import BookingPricingStack

app = cdk.App()
BookingPricingStack(
    app,
    "BookingPricingStack",
)

app.synth()
