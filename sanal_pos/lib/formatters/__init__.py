# -*- coding: utf-8 -*-

from .base_formatter import BaseResponseValueFormatter
from .basic_formatter import BasicResponseValueFormatter
from .boa_formatter import BoaPosResponseValueFormatter
from .estpos_formatter import EstPosResponseValueFormatter
from .formatter_factory import ResponseValueFormatterFactory
from .garanti_formatter import GarantiPosResponseValueFormatter
from .interpos_formatter import InterPosResponseValueFormatter
from .parampos_formatter import ParamPosResponseValueFormatter
from .posnet_formatter import PosNetResponseValueFormatter
from .tosla_formatter import ToslaPosResponseValueFormatter
