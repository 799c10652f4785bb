#!/usr/bin/env python3
"""
Setup script for threadlog package.
Uses pyproject.toml for configuration.
"""

from setuptools import setup

# Configuration is in pyproject.toml
setup()
