# -*- coding: utf-8 -*-

from enum import Enum


class Gateway(str, Enum):
    """Desteklenen gateway kodları"""

    AKBANK_POS = 'akbank_pos'
    EST_POS = 'estpos'
    EST_V3_POS = 'estv3_pos'
    GARANTI_POS = 'garanti_pos'
    INTERPOS = 'interpos'
    KUVEYT_POS = 'kuveyt_pos'
    KUVEYT_SOAP_API_POS = 'kuveyt_soap_api_pos'
    PARAM_POS = 'param_pos'
    PAYFLEX_CP_V4 = 'payflex_common'
    PAYFLEX_V4 = 'payflex_mpi'
    PAYFOR = 'payfor'
    POSNET = 'posnet'
    POSNET_V1 = 'posnet_v1'
    TOSLA = 'tosla'
    VAKIF_KATILIM = 'vakif_katilim'


class TxType(str, Enum):
    """İşlem tipleri"""

    PAY_AUTH = 'pay'
    PAY_PRE_AUTH = 'pre'
    PAY_POST_AUTH = 'post'
    CANCEL = 'cancel'
    REFUND = 'refund'
    REFUND_PARTIAL = 'refund_partial'
    STATUS = 'status'
    ORDER_HISTORY = 'order_history'
    HISTORY = 'history'
    CUSTOM_QUERY = 'custom_query'


class Currency(str, Enum):
    TRY = 'TRY'
    USD = 'USD'
    EUR = 'EUR'
    GBP = 'GBP'
    JPY = 'JPY'
    RUB = 'RUB'


class PaymentStatus(str, Enum):
    """Sipariş durumları"""

    ERROR = 'ERROR'
    PAYMENT_COMPLETED = 'PAYMENT_COMPLETED'
    PAYMENT_PENDING = 'PAYMENT_PENDING'
    CANCELED = 'CANCELED'
    PARTIALLY_REFUNDED = 'PARTIALLY_REFUNDED'
    FULLY_REFUNDED = 'FULLY_REFUNDED'
    PRE_AUTH_COMPLETED = 'PRE_AUTH_COMPLETED'
