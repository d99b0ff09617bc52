"""Authentication.

Users register with email/password and log in for a short-lived JWT
access token. Protected routes resolve that token to a CurrentIdentity,
whose user_id is the root of every ownership-scoped query.
"""
