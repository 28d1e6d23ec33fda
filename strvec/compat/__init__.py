"""Compatibility aliases for older StrVec names"""
