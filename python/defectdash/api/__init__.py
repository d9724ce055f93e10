"""
HTTP API for DefectDash.
"""
