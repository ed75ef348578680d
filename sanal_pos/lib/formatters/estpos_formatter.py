# -*- coding: utf-8 -*-

from ...constants import Gateway, TxType
from .base_formatter import BaseResponseValueFormatter


class EstPosResponseValueFormatter(BaseResponseValueFormatter):
    """EstPos / EstV3Pos (Payten) formatter'ı"""

    gateways = frozenset({
        Gateway.EST_POS,
        Gateway.EST_V3_POS,
    })

    def format_amount(self, raw_value, tx_type=None):
        """Durum ve sipariş geçmişi sorgularında tutar kuruş cinsinden gelir"""
        if tx_type in (TxType.STATUS, TxType.ORDER_HISTORY):
            return self._from_minor_units(raw_value)

        return self._to_float(raw_value)
