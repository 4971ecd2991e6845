"""Utility modules"""
