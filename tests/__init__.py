"""Tests for partial_deep_equal"""
