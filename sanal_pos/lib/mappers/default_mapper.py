# -*- coding: utf-8 -*-

from ...constants import Gateway
from .base_mapper import BaseResponseValueMapper


class DefaultResponseValueMapper(BaseResponseValueMapper):
    """Sadece ISO para birimi kodlarını çeviren gateway'ler"""

    gateways = frozenset({
        Gateway.INTERPOS,
        Gateway.PAYFLEX_CP_V4,
        Gateway.PAYFLEX_V4,
        Gateway.PAYFOR,
    })
