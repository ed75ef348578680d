# -*- coding: utf-8 -*-

from .response_value_service import ResponseValueService
