# -*- coding: utf-8 -*-

from ...constants import Currency, Gateway, PaymentStatus
from .base_mapper import BaseResponseValueMapper


class ParamPosResponseValueMapper(BaseResponseValueMapper):

    gateways = frozenset({Gateway.PARAM_POS})

    currency_mappings = {
        'TRL': Currency.TRY,
        'TL': Currency.TRY,
        'EUR': Currency.EUR,
        'USD': Currency.USD,
    }

    order_status_mappings = {
        'FAIL': PaymentStatus.ERROR,
        'BANK_FAIL': PaymentStatus.ERROR,
        'SUCCESS': PaymentStatus.PAYMENT_COMPLETED,
        'CANCEL': PaymentStatus.CANCELED,
        'REFUND': PaymentStatus.FULLY_REFUNDED,
        'PARTIAL_REFUND': PaymentStatus.PARTIALLY_REFUNDED,
    }
