"""
External service adapters for DefectDash.
"""
