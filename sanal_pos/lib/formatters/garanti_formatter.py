# -*- coding: utf-8 -*-

from ...constants import Gateway, TxType
from .base_formatter import BaseResponseValueFormatter


class GarantiPosResponseValueFormatter(BaseResponseValueFormatter):
    """Garanti BBVA POS formatter'ı"""

    gateways = frozenset({Gateway.GARANTI_POS})

    def format_amount(self, raw_value, tx_type=None):
        """Garanti tüm işlemlerde tutarı kuruş cinsinden döner: 100001 -> 1000.01"""
        return self._from_minor_units(raw_value)

    def format_installment(self, raw_value, tx_type=None):
        """İşlem geçmişinde peşin işlemler "Pesin" olarak gelir"""
        if raw_value is None:
            return 0

        if tx_type == TxType.HISTORY and raw_value in ('Pesin', '1'):
            return 0

        return super().format_installment(raw_value, tx_type)
