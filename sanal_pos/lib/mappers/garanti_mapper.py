# -*- coding: utf-8 -*-

from ...constants import Currency, Gateway, PaymentStatus, TxType
from .base_mapper import BaseResponseValueMapper


class GarantiPosResponseValueMapper(BaseResponseValueMapper):

    gateways = frozenset({Gateway.GARANTI_POS})

    history_currency_mappings = {
        'TL': Currency.TRY,
        'USD': Currency.USD,
        'EUR': Currency.EUR,
        'RUB': Currency.RUB,
        'JPY': Currency.JPY,
        'GBP': Currency.GBP,
    }

    # İşlem geçmişindeki TrxType değerleri
    history_tx_types = {
        'Satis': TxType.PAY_AUTH,
        'On Otorizasyon': TxType.PAY_PRE_AUTH,
        'On Otorizasyon Kapama': TxType.PAY_POST_AUTH,
        'Iade': TxType.REFUND,
        'Iptal': TxType.CANCEL,
    }

    def map_currency(self, raw_value, tx_type=None):
        """İşlem geçmişinde para birimi kod yerine isim olarak gelir"""
        if tx_type == TxType.HISTORY:
            return self.history_currency_mappings.get(raw_value)

        return super().map_currency(raw_value, tx_type)

    def map_order_status(self, raw_value, tx_type=None, transaction_tx_type=None):
        """
        Args:
            tx_type: sorgu isteğinin tipi (status / history)
            transaction_tx_type: geçmişteki işlemin tipi,
                verilmezse TrxType alanından çevrilmiş olmalı
        """
        if tx_type == TxType.STATUS:
            if raw_value == 'WAITINGPOSTAUTH':
                return PaymentStatus.PRE_AUTH_COMPLETED

            return raw_value

        if tx_type == TxType.HISTORY:
            if transaction_tx_type is None:
                return raw_value

            transaction_tx_type = self.history_tx_types.get(transaction_tx_type, transaction_tx_type)

            if raw_value in ('Basarili', 'Onaylandi'):
                if transaction_tx_type == TxType.CANCEL:
                    return PaymentStatus.CANCELED
                if transaction_tx_type == TxType.REFUND:
                    # Kısmi / tam iade ayrımı yanıttan yapılamıyor
                    return PaymentStatus.FULLY_REFUNDED
                if transaction_tx_type in (TxType.PAY_AUTH, TxType.PAY_POST_AUTH):
                    return PaymentStatus.PAYMENT_COMPLETED
                if transaction_tx_type == TxType.PAY_PRE_AUTH:
                    return PaymentStatus.PRE_AUTH_COMPLETED

                return raw_value

            if raw_value == 'Iptal':
                return raw_value

            return PaymentStatus.ERROR

        return raw_value
