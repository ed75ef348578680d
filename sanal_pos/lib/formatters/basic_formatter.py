# -*- coding: utf-8 -*-

from ...constants import Gateway
from .base_formatter import BaseResponseValueFormatter


class BasicResponseValueFormatter(BaseResponseValueFormatter):
    """Değerleri olduğu gibi dönen gateway'ler (Akbank, PayFlex, PayFor)"""

    gateways = frozenset({
        Gateway.AKBANK_POS,
        Gateway.PAYFLEX_CP_V4,
        Gateway.PAYFLEX_V4,
        Gateway.PAYFOR,
    })
