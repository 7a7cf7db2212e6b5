"""
Backend package for the ENFOCO API.

This package provides a FastAPI application that forwards landing-page forms
to Airtable and serves a small photo feed stored in a JSON file, with a
single shared-password admin session held in a signed cookie.
"""
