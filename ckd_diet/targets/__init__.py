# -*- coding: utf-8 -*-
"""Nutrient targets domain (diet chart generation + storage)."""
