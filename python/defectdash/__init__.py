"""
DefectDash - defect metrics dashboard backend.
"""
