"""
DefectDash API entry point.
"""
from defectdash.api.main import app, main

__all__ = ["app", "main"]


if __name__ == "__main__":
    main()
