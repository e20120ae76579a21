"""
Shared Utilities

Responsibility:
    Cross-cutting helpers used across all layers.

Contains:
    - Environment configuration helpers

Does NOT contain:
    - Layer-specific code
    - Business logic
"""
