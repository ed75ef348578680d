# -*- coding: utf-8 -*-

from ...constants import Gateway
from .base_formatter import BaseResponseValueFormatter


class InterPosResponseValueFormatter(BaseResponseValueFormatter):
    """Denizbank InterPOS formatter'ı"""

    gateways = frozenset({Gateway.INTERPOS})

    def format_amount(self, raw_value, tx_type=None):
        """InterPos tutarları "1.056,2" formatında döner"""
        return self._from_european_notation(raw_value)

    def format_installment(self, raw_value, tx_type=None):
        raise NotImplementedError("InterPos taksit formatlamayı desteklemiyor")
