"""Applicant Service.

Registers applicants with their address, intake form and photo.
"""

__version__ = "1.0.0"
