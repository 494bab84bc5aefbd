# -*- coding: utf-8 -*-
"""
Core Package
============

Pure, framework-free tag grammar, tokenizer, validators and renderer.
"""
