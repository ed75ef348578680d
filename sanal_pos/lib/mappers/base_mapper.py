# -*- coding: utf-8 -*-

import logging
from enum import Enum

from ...constants import Currency
from ..registry import to_gateway

_logger = logging.getLogger(__name__)

# ISO 4217 sayısal para birimi kodları
ISO_CURRENCY_CODES = {
    '949': Currency.TRY,
    '840': Currency.USD,
    '978': Currency.EUR,
    '826': Currency.GBP,
    '392': Currency.JPY,
    '643': Currency.RUB,
}


class BaseResponseValueMapper:
    """Banka yanıtındaki kodları (para birimi, sipariş durumu) ortak değerlere çevirir"""

    gateways = frozenset()

    currency_mappings = ISO_CURRENCY_CODES

    # Boş ise gateway sipariş durumu eşlemeyi desteklemiyor
    order_status_mappings = {}

    @classmethod
    def supports(cls, gateway):
        return to_gateway(gateway) in cls.gateways

    def map_currency(self, raw_value, tx_type=None):
        """
        Para birimi kodunu çevir

        Returns:
            Currency|None: bilinmeyen kodlarda None
        """
        if raw_value is None:
            return None

        return self.currency_mappings.get(self._key(raw_value).strip())

    def map_order_status(self, raw_value, tx_type=None):
        """
        Sipariş durumunu çevir, bilinmeyen durumlar olduğu gibi döner

        Returns:
            PaymentStatus|str
        """
        if not self.order_status_mappings:
            raise NotImplementedError(
                f"{type(self).__name__} sipariş durumu eşlemeyi desteklemiyor"
            )

        return self.order_status_mappings.get(self._key(raw_value), raw_value)

    @staticmethod
    def _key(raw_value):
        """Eşleme tablolarında kullanılan string anahtar"""
        if isinstance(raw_value, Enum):
            return str(raw_value.value)

        return str(raw_value)
