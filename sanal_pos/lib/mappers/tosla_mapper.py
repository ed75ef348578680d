# -*- coding: utf-8 -*-

from ...constants import Gateway, PaymentStatus
from .base_mapper import BaseResponseValueMapper


class ToslaPosResponseValueMapper(BaseResponseValueMapper):

    gateways = frozenset({Gateway.TOSLA})

    order_status_mappings = {
        '0': PaymentStatus.ERROR,
        '1': PaymentStatus.PAYMENT_COMPLETED,
        '2': PaymentStatus.CANCELED,
        '3': PaymentStatus.PARTIALLY_REFUNDED,
        '4': PaymentStatus.FULLY_REFUNDED,
    }
