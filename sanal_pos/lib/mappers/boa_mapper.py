# -*- coding: utf-8 -*-

from ...constants import Currency, Gateway, PaymentStatus
from .base_mapper import BaseResponseValueMapper


class BoaPosResponseValueMapper(BaseResponseValueMapper):
    """KuveytPos, KuveytSoapApiPos ve VakifKatilim eşlemeleri"""

    gateways = frozenset({
        Gateway.KUVEYT_POS,
        Gateway.KUVEYT_SOAP_API_POS,
        Gateway.VAKIF_KATILIM,
    })

    # Yanıtta kod başında 0 ile de gelebiliyor
    currency_mappings = {
        '949': Currency.TRY,
        '0949': Currency.TRY,
        '840': Currency.USD,
        '0840': Currency.USD,
        '978': Currency.EUR,
        '0978': Currency.EUR,
    }

    order_status_mappings = {
        '1': PaymentStatus.PAYMENT_COMPLETED,
        '4': PaymentStatus.FULLY_REFUNDED,
        '5': PaymentStatus.PARTIALLY_REFUNDED,
        '6': PaymentStatus.CANCELED,
    }
