"""Mock data package for the CMS mock server.

Seeds the in-memory store with realistic students, courses, teachers
and accounts so the frontend can run without a real backend.

Contents:
    fixtures/    — One JSON file per model (camelCase keys)
    fixtures.py  — Fixture file loader
    seed.py      — Creates fixture records in dependency order
    factory.py   — Login tokens and timestamps generated per call

Called by: models/database.py, api/routes/*
"""
