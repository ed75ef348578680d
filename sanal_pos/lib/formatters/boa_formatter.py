# -*- coding: utf-8 -*-

from ...constants import Gateway, TxType
from .base_formatter import BaseResponseValueFormatter


class BoaPosResponseValueFormatter(BaseResponseValueFormatter):
    """KuveytPos ve VakıfKatılım (BOA altyapısı) formatter'ı"""

    gateways = frozenset({
        Gateway.KUVEYT_POS,
        Gateway.KUVEYT_SOAP_API_POS,
        Gateway.VAKIF_KATILIM,
    })

    def format_amount(self, raw_value, tx_type=None):
        """
        Sorgu yanıtlarında tutar ana birimde gelir,
        diğer işlemlerde kuruş cinsindendir: 10001 -> 100.01
        """
        if tx_type in (TxType.STATUS, TxType.ORDER_HISTORY, TxType.HISTORY):
            return self._to_float(raw_value)

        return self._from_minor_units(raw_value)
