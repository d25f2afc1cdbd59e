# -*- coding: utf-8 -*-
"""Daily intake domain (meal nutrient aggregation and per-day totals)."""
