"""
Setup script for the SparkPost Python client.

This file exists for compatibility with older build tools.
The primary build configuration, including the version taken from
sparkpost/_version.py, is in pyproject.toml.
"""

from setuptools import setup

setup()
