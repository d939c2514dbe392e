#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Interface graphique BezierTools (PySide6 + matplotlib)."""
