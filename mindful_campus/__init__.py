"""Mindful Campus wellness-support service"""
