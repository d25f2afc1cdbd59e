# -*- coding: utf-8 -*-
"""CKD diet tracker backend.

Food catalog, meal composition, daily nutrient intake and diet-chart targets
for chronic kidney disease patients.
"""
