# -*- coding: utf-8 -*-
"""Auth domain (signup/login, JWT, password hashing)."""
