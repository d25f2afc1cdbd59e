# -*- coding: utf-8 -*-
"""User profile and favourite foods."""
