"""
Passport Compatibility

This package compares two partners' intimacy passports (preference
questionnaires) and produces a compatibility report: an overall score,
communication, boundaries and intimacy sub-scores, and written insights.

Key Design Decisions:
- The scorer is a pure function; fetching answers and questions is the caller's job
- The question catalog resolves in two tiers: hosted table, then static fallback
- Scoring thresholds live in configuration, not in code paths
"""

__version__ = "1.0.0"
