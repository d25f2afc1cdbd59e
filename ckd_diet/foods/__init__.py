# -*- coding: utf-8 -*-
"""Food catalog (search, create, sample seed)."""
