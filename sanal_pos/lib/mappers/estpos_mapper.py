# -*- coding: utf-8 -*-

from ...constants import Gateway, PaymentStatus
from .base_mapper import BaseResponseValueMapper


class EstPosResponseValueMapper(BaseResponseValueMapper):

    gateways = frozenset({
        Gateway.EST_POS,
        Gateway.EST_V3_POS,
    })

    order_status_mappings = {
        'D': PaymentStatus.ERROR,
        'ERR': PaymentStatus.ERROR,
        'A': PaymentStatus.PAYMENT_COMPLETED,
        'C': PaymentStatus.PAYMENT_COMPLETED,
        'S': PaymentStatus.PAYMENT_COMPLETED,
        'PN': PaymentStatus.PAYMENT_PENDING,
        'CNCL': PaymentStatus.CANCELED,
        'V': PaymentStatus.CANCELED,
    }
