"""
Patient accounts: signup, sign-in and profile lookup.
"""
