# -*- coding: utf-8 -*-

from .akbank_mapper import AkbankPosResponseValueMapper
from .base_mapper import BaseResponseValueMapper
from .boa_mapper import BoaPosResponseValueMapper
from .default_mapper import DefaultResponseValueMapper
from .estpos_mapper import EstPosResponseValueMapper
from .garanti_mapper import GarantiPosResponseValueMapper
from .mapper_factory import ResponseValueMapperFactory
from .parampos_mapper import ParamPosResponseValueMapper
from .posnet_mapper import PosNetPosResponseValueMapper, PosNetV1PosResponseValueMapper
from .tosla_mapper import ToslaPosResponseValueMapper
