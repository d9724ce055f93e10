"""
Domain services for DefectDash.
"""
