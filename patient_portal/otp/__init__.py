"""
Email one-time password issuance and verification.
"""
