# -*- coding: utf-8 -*-

from ...constants import Gateway, TxType
from .base_formatter import BaseResponseValueFormatter


class ParamPosResponseValueFormatter(BaseResponseValueFormatter):
    """ParamPos formatter'ı"""

    gateways = frozenset({Gateway.PARAM_POS})

    def format_amount(self, raw_value, tx_type=None):
        """Ödeme yanıtlarında ondalık ayracı virgüldür: "1000,01" -> 1000.01"""
        if tx_type == TxType.STATUS:
            return self._to_float(raw_value)

        if isinstance(raw_value, str):
            raw_value = raw_value.replace(',', '.')

        return self._to_float(raw_value)
