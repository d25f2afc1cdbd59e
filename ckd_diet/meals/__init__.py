# -*- coding: utf-8 -*-
"""Meals (named groups of foods with quantities)."""
