"""
Patient portal API.

Patient signup and sign-in with email OTP verification.
"""
