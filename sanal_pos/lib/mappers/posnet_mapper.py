# -*- coding: utf-8 -*-

from ...constants import Currency, Gateway, PaymentStatus, TxType
from .base_mapper import BaseResponseValueMapper

# Para birimi iki harfli kodla döner
POSNET_CURRENCY_CODES = {
    'TL': Currency.TRY,
    'US': Currency.USD,
    'EU': Currency.EUR,
    'GB': Currency.GBP,
    'JP': Currency.JPY,
    'RU': Currency.RUB,
}


class PosNetPosResponseValueMapper(BaseResponseValueMapper):
    """Yapı Kredi PosNet eşlemeleri, sipariş durumu eşlemesi yok"""

    gateways = frozenset({Gateway.POSNET})

    currency_mappings = POSNET_CURRENCY_CODES


class PosNetV1PosResponseValueMapper(BaseResponseValueMapper):
    """Albaraka PosNetV1 eşlemeleri"""

    gateways = frozenset({Gateway.POSNET_V1})

    # Sadece durum sorgusunda iki harfli kod döner
    status_currency_mappings = POSNET_CURRENCY_CODES

    # Durum sorgusu sipariş durumu yerine son işlemin tipini döner
    order_status_mappings = {
        TxType.PAY_AUTH.value: PaymentStatus.PAYMENT_COMPLETED,
        TxType.CANCEL.value: PaymentStatus.CANCELED,
        TxType.REFUND.value: PaymentStatus.FULLY_REFUNDED,
    }

    def map_currency(self, raw_value, tx_type=None):
        if tx_type == TxType.STATUS:
            return self.status_currency_mappings.get(raw_value)

        return super().map_currency(raw_value, tx_type)
