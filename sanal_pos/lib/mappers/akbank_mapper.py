# -*- coding: utf-8 -*-

from ...constants import Gateway, PaymentStatus
from .base_mapper import BaseResponseValueMapper


class AkbankPosResponseValueMapper(BaseResponseValueMapper):

    gateways = frozenset({Gateway.AKBANK_POS})

    # N: Normal, S: Şüpheli, V: İptal, R: Reversal
    order_status_mappings = {
        'N': PaymentStatus.PAYMENT_COMPLETED,
        'S': PaymentStatus.ERROR,
        'V': PaymentStatus.CANCELED,
        'R': PaymentStatus.FULLY_REFUNDED,

        # İşlem geçmişi sorgusunda dönen durumlar
        'Başarılı': PaymentStatus.PAYMENT_COMPLETED,
        'Başarısız': PaymentStatus.ERROR,
        'İptal': PaymentStatus.CANCELED,
    }

    recurring_order_status_mappings = {
        'S': PaymentStatus.PAYMENT_COMPLETED,
        'W': PaymentStatus.PAYMENT_PENDING,
        # Gerçekleşmiş ödeme iptal edildiğinde
        'V': PaymentStatus.CANCELED,
        # Gerçekleşmemiş ödeme iptal edildiğinde
        'C': PaymentStatus.CANCELED,
    }

    def map_order_status(self, raw_value, tx_type=None, pre_auth_status=None, is_recurring=False):
        """
        Args:
            pre_auth_status (str): "O" açık, "C" kapalı ön provizyon
            is_recurring (bool): tekrarlayan ödeme siparişi mi
        """
        if is_recurring:
            return self.recurring_order_status_mappings.get(raw_value, raw_value)

        status = super().map_order_status(raw_value, tx_type)

        if status == PaymentStatus.PAYMENT_COMPLETED and pre_auth_status == 'O':
            return PaymentStatus.PRE_AUTH_COMPLETED

        return status
