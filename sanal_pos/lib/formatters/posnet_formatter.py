# -*- coding: utf-8 -*-

from ...constants import Gateway, TxType
from .base_formatter import BaseResponseValueFormatter


class PosNetResponseValueFormatter(BaseResponseValueFormatter):
    """YapıKredi PosNet ve PosNetV1 (Albaraka) formatter'ı"""

    gateways = frozenset({
        Gateway.POSNET,
        Gateway.POSNET_V1,
    })

    def format_amount(self, raw_value, tx_type=None):
        """
        Durum sorgusunda tutar "1.056,2" formatında,
        diğer işlemlerde kuruş cinsinden gelir.
        """
        if tx_type == TxType.STATUS:
            return self._from_european_notation(raw_value)

        return self._from_minor_units(raw_value)
