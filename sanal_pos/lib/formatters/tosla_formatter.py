# -*- coding: utf-8 -*-

from ...constants import Gateway
from .base_formatter import BaseResponseValueFormatter


class ToslaPosResponseValueFormatter(BaseResponseValueFormatter):
    """Tosla (Eski AKÖde) formatter'ı"""

    gateways = frozenset({Gateway.TOSLA})

    def format_amount(self, raw_value, tx_type=None):
        return self._from_minor_units(raw_value)

    def format_installment(self, raw_value, tx_type=None):
        raise NotImplementedError("Tosla taksit formatlamayı desteklemiyor")
